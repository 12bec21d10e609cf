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

"""Entry point for validating decoded manifests against a JSON Schema."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..config import FileStoreConfig, store_config
from ..options import SchemaMode
from .validators import PassThroughValidator, SchemaValidator

logger = logging.getLogger(__name__)


def normalize_schema_uri(schema_file: str) -> str:
    """Turn a schema path into a URI.

    References that already carry a scheme (e.g. "file://", "https://") are
    returned unchanged; plain paths are made absolute and prefixed with file://.
    """
    if "://" in schema_file:
        return schema_file
    return "file://" + Path(schema_file).absolute().as_posix()


def build_schema_description(schema_uri: str, mode: SchemaMode = SchemaMode.STRICT) -> Dict[str, Any]:
    description: Dict[str, Any] = {"$ref": schema_uri}
    if mode == SchemaMode.LAX:
        description["additionalProperties"] = True
        description["required"] = []
    return description


def check_syntax(content: str, file_path: Optional[str] = None) -> bool:
    """Check YAML syntax of content that decoded to nothing.

    Detailed diagnostics are not produced yet; content reaching this point has
    already been accepted by the YAML loader.
    """
    logger.debug(f"Syntax check for {file_path or '<string>'}")
    return True


class SchemaGate:
    """Resolve the schema reference, apply the mode and run the validator."""

    def __init__(
        self,
        validator: Optional[SchemaValidator] = None,
        config: Optional[FileStoreConfig] = None,
    ):
        self.validator = validator if validator is not None else PassThroughValidator()
        self.config = config if config is not None else store_config

    def validate(
        self,
        document: Any,
        mode: SchemaMode = SchemaMode.STRICT,
        schema_file: Optional[str] = None,
    ) -> bool:
        """Validate a decoded document.

        Args:
            document: Decoded manifest
            mode: SchemaMode.STRICT uses the schema as is, SchemaMode.LAX allows
                additional properties and drops required fields
            schema_file: Path or URI of the schema. If None, uses the configured default.

        Returns:
            True on success

        Raises:
            SchemaValidationError: If the validator rejects the document
        """
        mode = SchemaMode(mode)
        if schema_file is None:
            schema_file = self.config.schema_path

        description = build_schema_description(normalize_schema_uri(schema_file), mode)
        logger.debug(f"Validating against {description['$ref']} ({mode.name.lower()})")
        self.validator.validate(document, description)
        return True
