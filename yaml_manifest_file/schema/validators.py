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

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from urllib.parse import unquote, urlparse

import jsonschema

from ..exceptions import SchemaValidationError

logger = logging.getLogger(__name__)

JsonPointer = str


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    yaml_path: Optional[JsonPointer] = None


def _jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def _pointer(path) -> JsonPointer:
    if not path:
        return ""
    return "/" + "/".join(_jp_escape(str(p)) for p in path)


def format_schema_issues(issues: List[SchemaIssue]) -> str:
    return "\n".join(
        f"  - {i.message}" + (f" (yaml_path={i.yaml_path})" if i.yaml_path else "")
        for i in issues
    )


class SchemaValidator(ABC):
    """Validation engine used by the schema gate."""

    @abstractmethod
    def validate(self, document: Any, schema_description: Dict[str, Any]) -> None:
        """Validate document against a schema description.

        Raises:
            SchemaValidationError: If the document does not satisfy the schema
        """


class PassThroughValidator(SchemaValidator):
    """Accept every document.

    This is the default engine: schema validation of manifests is not enforced
    yet, so validate_schema() reports success for any parseable file.
    """

    def validate(self, document: Any, schema_description: Dict[str, Any]) -> None:
        logger.debug(f"Skipping schema validation against {schema_description.get('$ref')}")


class JsonSchemaValidator(SchemaValidator):
    """Validate documents with jsonschema.

    The description's "$ref" must be a file:// URI of a JSON schema. Other keys
    of the description (lax overrides) replace the top-level keys of the loaded
    schema.
    """

    def __init__(self):
        self._schema_cache: Dict[str, dict] = {}

    def load_schema(self, uri: str) -> dict:
        if uri in self._schema_cache:
            return self._schema_cache[uri]

        parsed = urlparse(uri)
        if parsed.scheme != "file":
            raise SchemaValidationError(f"Unsupported schema URI: {uri}")

        schema_path = unquote(parsed.path)
        try:
            with open(schema_path, "r", encoding="utf-8") as f:
                schema = json.load(f)
        except FileNotFoundError as exc:
            raise SchemaValidationError(f"Schema file not found: {schema_path}") from exc
        except json.JSONDecodeError as exc:
            raise SchemaValidationError(f"Invalid JSON in schema file {schema_path}: {exc.msg}") from exc

        self._schema_cache[uri] = schema
        return schema

    def validate(self, document: Any, schema_description: Dict[str, Any]) -> None:
        uri = schema_description.get("$ref")
        if not uri:
            raise SchemaValidationError("Schema description has no $ref")

        schema = dict(self.load_schema(uri))
        schema.update({k: v for k, v in schema_description.items() if k != "$ref"})

        validator_cls = jsonschema.validators.validator_for(schema)
        validator = validator_cls(schema)
        errors = sorted(validator.iter_errors(document), key=lambda e: [str(p) for p in e.absolute_path])
        if not errors:
            return

        issues = [SchemaIssue(message=e.message, yaml_path=_pointer(e.absolute_path)) for e in errors]
        raise SchemaValidationError(
            f"Schema validation failed against {uri}:\n{format_schema_issues(issues)}",
            issues=issues,
        )
