"""Unit tests for the schema gate and validators."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from yaml_manifest_file import FileStoreConfig, SchemaMode, SchemaValidationError, YamlCodec, YamlFile
from yaml_manifest_file.config import DEFAULT_SCHEMA_PATH
from yaml_manifest_file.schema import (
    JsonSchemaValidator,
    PassThroughValidator,
    SchemaGate,
    SchemaValidator,
    build_schema_description,
    check_syntax,
    normalize_schema_uri,
)


class RecordingValidator(SchemaValidator):
    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def validate(self, document: Any, schema_description: Dict[str, Any]) -> None:
        self.calls.append((document, schema_description))


def test_default_schema_resource_exists() -> None:
    path = Path(DEFAULT_SCHEMA_PATH)
    assert path.is_file()
    assert json.loads(path.read_text())["type"] == "object"


def test_normalize_absolute_path(tmp_path: Path) -> None:
    schema = tmp_path / "schema.json"
    assert normalize_schema_uri(str(schema)) == "file://" + schema.as_posix()


def test_normalize_keeps_schemed_uri() -> None:
    assert normalize_schema_uri("phar://composer.phar/res/schema.json") == "phar://composer.phar/res/schema.json"
    assert normalize_schema_uri("file:///etc/schema.json") == "file:///etc/schema.json"


def test_normalize_relative_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert normalize_schema_uri("res/schema.json") == "file://" + (tmp_path / "res" / "schema.json").as_posix()


def test_build_description_strict() -> None:
    assert build_schema_description("file:///s.json", SchemaMode.STRICT) == {"$ref": "file:///s.json"}


def test_build_description_lax() -> None:
    assert build_schema_description("file:///s.json", SchemaMode.LAX) == {
        "$ref": "file:///s.json",
        "additionalProperties": True,
        "required": [],
    }


def test_check_syntax_stub() -> None:
    assert check_syntax("", "composer.yaml") is True


def test_pass_through_accepts_anything() -> None:
    PassThroughValidator().validate({"anything": object()}, {"$ref": "file:///missing.json"})


def test_gate_defaults_to_configured_schema() -> None:
    validator = RecordingValidator()
    gate = SchemaGate(validator, FileStoreConfig())
    assert gate.validate({"a": 1}) is True
    document, description = validator.calls[0]
    assert document == {"a": 1}
    assert description["$ref"].startswith("file://")
    assert description["$ref"].endswith("manifest-schema.json")
    assert "required" not in description


def test_gate_accepts_integer_mode() -> None:
    validator = RecordingValidator()
    SchemaGate(validator).validate({}, 1, "file:///s.json")
    assert validator.calls[0][1] == {"$ref": "file:///s.json", "additionalProperties": True, "required": []}


def test_gate_uses_config_schema_path(tmp_path: Path) -> None:
    validator = RecordingValidator()
    schema = tmp_path / "custom.json"
    SchemaGate(validator, FileStoreConfig(schema_path=str(schema))).validate({})
    assert validator.calls[0][1]["$ref"] == "file://" + schema.as_posix()


def test_gate_default_validator_is_pass_through() -> None:
    assert isinstance(SchemaGate().validator, PassThroughValidator)


# --- JsonSchemaValidator ----------------------------------------------------


def _write_manifest(path: Path, data: Any) -> YamlFile:
    path.write_text(YamlCodec.encode(data))
    return YamlFile(str(path), validator=JsonSchemaValidator())


def test_json_schema_valid_manifest(manifest_path: Path) -> None:
    yaml_file = _write_manifest(manifest_path, {"name": "vendor/pkg", "require": {"php": ">=7.2"}})
    assert yaml_file.validate_schema() is True


def test_json_schema_missing_required_strict(manifest_path: Path) -> None:
    yaml_file = _write_manifest(manifest_path, {"description": "no name"})
    with pytest.raises(SchemaValidationError) as exc_info:
        yaml_file.validate_schema(SchemaMode.STRICT)
    assert any("'name' is a required property" in i.message for i in exc_info.value.issues)


def test_json_schema_missing_required_lax(manifest_path: Path) -> None:
    yaml_file = _write_manifest(manifest_path, {"description": "no name"})
    assert yaml_file.validate_schema(SchemaMode.LAX) is True


def test_json_schema_additional_property(manifest_path: Path) -> None:
    yaml_file = _write_manifest(manifest_path, {"name": "vendor/pkg", "unknown-key": 1})
    with pytest.raises(SchemaValidationError):
        yaml_file.validate_schema(SchemaMode.STRICT)
    assert yaml_file.validate_schema(SchemaMode.LAX) is True


def test_json_schema_issue_paths(manifest_path: Path) -> None:
    yaml_file = _write_manifest(manifest_path, {"name": "vendor/pkg", "require": {"php": 7}})
    with pytest.raises(SchemaValidationError) as exc_info:
        yaml_file.validate_schema(SchemaMode.LAX)
    assert [i.yaml_path for i in exc_info.value.issues] == ["/require/php"]
    assert "yaml_path=/require/php" in str(exc_info.value)


def test_json_schema_custom_schema_file(manifest_path: Path, tmp_path: Path) -> None:
    schema = tmp_path / "lock-schema.json"
    schema.write_text(json.dumps({"type": "object", "required": ["packages"]}))
    yaml_file = _write_manifest(manifest_path, {"packages": []})
    assert yaml_file.validate_schema(SchemaMode.STRICT, str(schema)) is True


def test_json_schema_missing_schema_file(manifest_path: Path, tmp_path: Path) -> None:
    yaml_file = _write_manifest(manifest_path, {"name": "vendor/pkg"})
    with pytest.raises(SchemaValidationError, match="Schema file not found"):
        yaml_file.validate_schema(SchemaMode.STRICT, str(tmp_path / "missing.json"))


def test_json_schema_unsupported_scheme() -> None:
    with pytest.raises(SchemaValidationError, match="Unsupported schema URI"):
        JsonSchemaValidator().validate({}, {"$ref": "phar://composer.phar/res/schema.json"})
