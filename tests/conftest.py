"""Shared fixtures for yaml_manifest_file tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from yaml_manifest_file import FileStoreConfig


@pytest.fixture
def fast_config() -> FileStoreConfig:
    """Config with no delay between write attempts."""
    return FileStoreConfig(write_attempts=3, retry_delay=0.0)


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    return tmp_path / "manifest.yaml"
