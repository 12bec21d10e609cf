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

"""YAML encoding and decoding of manifest documents."""

from typing import Any, Optional

import yaml

from .exceptions import YamlEncodingError, YamlParsingError
from .options import EncodeOptions, coerce_options
from .source_location import format_source, location_from_yaml_error

# Nesting depth is unlimited in block style; indent width is fixed.
YAML_INDENT = 4


class YamlCodec:
    """Thin wrapper around PyYAML's safe dumper and loader."""

    @staticmethod
    def encode(data: Any, options: Optional[EncodeOptions] = None) -> str:
        """Encode data into YAML text.

        Args:
            data: Document to encode (scalars, dicts and lists)
            options: EncodeOptions or legacy integer flags; defaults to all flags set

        Returns:
            YAML text, terminated by an extra newline when pretty printing

        Raises:
            YamlEncodingError: If data holds values the safe dumper cannot represent
        """
        options = coerce_options(options)
        try:
            text = yaml.safe_dump(
                data,
                indent=YAML_INDENT,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
        except yaml.YAMLError as exc:
            raise YamlEncodingError(f"Failed to encode YAML: {exc}") from exc
        if options.pretty_print:
            text += "\n"
        return text

    @staticmethod
    def decode(text: Optional[str], path: Optional[str] = None) -> Any:
        """Decode YAML text.

        Args:
            text: YAML content; None is returned as None without parsing
            path: Source of the content, used to annotate parse errors

        Returns:
            The decoded document

        Raises:
            YamlParsingError: If the content is not valid YAML
        """
        if text is None:
            return None

        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            location = location_from_yaml_error(path, exc)
            problem = getattr(exc, "problem", None) or str(exc)
            target = f" {path}" if path else ""
            raise YamlParsingError(
                f"Failed to parse YAML{target}: {problem}{format_source(location)}",
                location=location,
            ) from exc
