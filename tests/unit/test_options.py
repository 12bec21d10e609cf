"""Unit tests for EncodeOptions and SchemaMode."""

from __future__ import annotations

import pytest

from yaml_manifest_file import (
    DEFAULT_FLAGS,
    PRETTY_PRINT,
    UNESCAPED_SLASHES,
    UNESCAPED_UNICODE,
    EncodeOptions,
    SchemaMode,
)
from yaml_manifest_file.options import coerce_options


def test_flag_values() -> None:
    assert UNESCAPED_SLASHES == 64
    assert PRETTY_PRINT == 128
    assert UNESCAPED_UNICODE == 256
    assert DEFAULT_FLAGS == 448


def test_default_options_enable_everything() -> None:
    opts = EncodeOptions()
    assert opts.unescaped_slashes and opts.pretty_print and opts.unescaped_unicode
    assert opts.flags == DEFAULT_FLAGS


def test_from_flags() -> None:
    opts = EncodeOptions.from_flags(PRETTY_PRINT)
    assert opts == EncodeOptions(unescaped_slashes=False, pretty_print=True, unescaped_unicode=False)
    assert opts.flags == PRETTY_PRINT
    assert EncodeOptions.from_flags(DEFAULT_FLAGS) == EncodeOptions()


def test_schema_mode_values() -> None:
    assert SchemaMode.LAX == 1
    assert SchemaMode.STRICT == 2
    assert SchemaMode(1) is SchemaMode.LAX


def test_coerce_options() -> None:
    assert coerce_options(None) == EncodeOptions()
    opts = EncodeOptions(pretty_print=False)
    assert coerce_options(opts) is opts
    assert coerce_options(0) == EncodeOptions(False, False, False)


def test_coerce_options_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        coerce_options("pretty")
    with pytest.raises(TypeError):
        coerce_options(True)
