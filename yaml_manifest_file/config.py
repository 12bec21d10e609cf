# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration management for YAML manifest files."""

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path

from .utils.logging_utils import configure_split_stream_logging

ENV_PREFIX = "YAML_MANIFEST_FILE_"

DEFAULT_SCHEMA_PATH = str(Path(__file__).parent / "schema" / "resources" / "manifest-schema.json")


@dataclass
class FileStoreConfig:
    """Configuration class for reading and writing manifest files."""
    write_attempts: int = 3
    retry_delay: float = 0.5
    fetch_timeout: float = 30.0
    log_level: str = "INFO"
    print_level: str = "ERROR"

    # paths
    schema_path: str = field(default=DEFAULT_SCHEMA_PATH)

    def __post_init__(self):
        if self.write_attempts < 1:
            raise ValueError(f"write_attempts must be at least 1, got {self.write_attempts}")
        if self.retry_delay < 0:
            raise ValueError(f"retry_delay must not be negative, got {self.retry_delay}")

    @classmethod
    def from_env(cls) -> 'FileStoreConfig':
        """Create configuration from environment variables."""
        return cls(
            write_attempts=int(os.getenv(ENV_PREFIX + 'WRITE_ATTEMPTS', '3')),
            retry_delay=float(os.getenv(ENV_PREFIX + 'RETRY_DELAY', '0.5')),
            fetch_timeout=float(os.getenv(ENV_PREFIX + 'FETCH_TIMEOUT', '30')),
            log_level=os.getenv(ENV_PREFIX + 'LOG_LEVEL', 'INFO'),
            print_level=os.getenv(ENV_PREFIX + 'PRINT_LEVEL', 'ERROR'),
            schema_path=os.getenv(ENV_PREFIX + 'SCHEMA_PATH', DEFAULT_SCHEMA_PATH),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging for the package based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = getattr(logging, self.print_level.upper(), logging.ERROR)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        return configure_split_stream_logging(
            level=level,
            stderr_level=stderr_level,
            formatter=formatter,
            logger_name='yaml_manifest_file',
        )


# Global configuration instance
store_config = FileStoreConfig.from_env()
