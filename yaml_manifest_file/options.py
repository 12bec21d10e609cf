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

"""Encoding options and schema modes."""

from dataclasses import dataclass
from enum import IntEnum

# Bit values kept compatible with the JSON encoder flags manifests have always used.
UNESCAPED_SLASHES = 64
PRETTY_PRINT = 128
UNESCAPED_UNICODE = 256
DEFAULT_FLAGS = UNESCAPED_SLASHES | PRETTY_PRINT | UNESCAPED_UNICODE


class SchemaMode(IntEnum):
    """Validation strictness."""

    LAX = 1
    STRICT = 2


@dataclass(frozen=True)
class EncodeOptions:
    """Options for encoding a document.

    Only ``pretty_print`` changes the output today (a trailing newline is
    appended). ``unescaped_slashes`` and ``unescaped_unicode`` are accepted so
    callers passing the full flag set keep working, but YAML output is the same
    either way.
    """

    unescaped_slashes: bool = True
    pretty_print: bool = True
    unescaped_unicode: bool = True

    @classmethod
    def from_flags(cls, flags: int) -> "EncodeOptions":
        return cls(
            unescaped_slashes=bool(flags & UNESCAPED_SLASHES),
            pretty_print=bool(flags & PRETTY_PRINT),
            unescaped_unicode=bool(flags & UNESCAPED_UNICODE),
        )

    @property
    def flags(self) -> int:
        value = 0
        if self.unescaped_slashes:
            value |= UNESCAPED_SLASHES
        if self.pretty_print:
            value |= PRETTY_PRINT
        if self.unescaped_unicode:
            value |= UNESCAPED_UNICODE
        return value


def coerce_options(options) -> EncodeOptions:
    """Accept None, an EncodeOptions record or a legacy integer bitmask."""
    if options is None:
        return EncodeOptions()
    if isinstance(options, EncodeOptions):
        return options
    if isinstance(options, int) and not isinstance(options, bool):
        return EncodeOptions.from_flags(options)
    raise TypeError(f"Unsupported encode options: {options!r}")
