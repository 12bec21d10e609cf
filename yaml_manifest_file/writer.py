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

"""Writing encoded manifests to disk with bounded retries."""

import logging
import os
import time
from pathlib import Path
from typing import Callable, Optional, Union

from .config import FileStoreConfig, store_config
from .exceptions import DirectoryCreationError, DirectoryOccupiedError

logger = logging.getLogger(__name__)


class WriteCoordinator:
    """Prepare the destination directory and write text with retries.

    A single writer per path is assumed. A failed attempt is not cleaned up, so
    the file may be missing or truncated until a later attempt succeeds.
    """

    def __init__(
        self,
        config: Optional[FileStoreConfig] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize write coordinator.

        Args:
            config: Retry settings. If None, uses global config.
            sleep: Blocking wait used between attempts.
        """
        self.config = config if config is not None else store_config
        self._sleep = sleep

    @staticmethod
    def prepare_directory(path: Union[str, Path]) -> Path:
        """Make sure the parent directory of path exists.

        Raises:
            DirectoryOccupiedError: If something other than a directory is in the way
            DirectoryCreationError: If the directory tree could not be created
        """
        directory = Path(path).parent
        if directory.is_dir():
            return directory

        if directory.exists():
            raise DirectoryOccupiedError(
                f"{directory} exists and is not a directory.", directory=str(directory)
            )

        logger.debug(f"Creating directory {directory}")
        try:
            os.makedirs(directory, mode=0o777, exist_ok=True)
        except OSError as exc:
            raise DirectoryCreationError(
                f"{directory} does not exist and could not be created.", directory=str(directory)
            ) from exc

        return directory

    def write(self, path: Union[str, Path], content: str) -> None:
        """Write content to path, replacing existing content.

        The directory is prepared once; only the write itself is retried. The
        error of the final attempt propagates unchanged.
        """
        self.prepare_directory(path)

        attempts = self.config.write_attempts
        for attempt in range(1, attempts + 1):
            try:
                self._write_once(path, content)
            except OSError as exc:
                if attempt >= attempts:
                    logger.error(f"Failed to write {path} after {attempts} attempts: {exc}")
                    raise
                logger.warning(
                    f"Write attempt {attempt}/{attempts} for {path} failed: {exc}; "
                    f"retrying in {self.config.retry_delay}s"
                )
                self._sleep(self.config.retry_delay)
            else:
                logger.debug(f"Wrote {path}")
                return

    @staticmethod
    def _write_once(path: Union[str, Path], content: str) -> None:
        with open(path, "w", encoding="utf-8") as stream:
            stream.write(content)
