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

"""Reads and writes YAML manifest files."""

import logging
from pathlib import Path
from typing import Any, Optional

from .codec import YamlCodec
from .config import FileStoreConfig, store_config
from .exceptions import ArgumentError, FileReadError, TransportError
from .fetchers import ContentFetcher, LocalFetch, is_remote_path
from .options import EncodeOptions, SchemaMode
from .schema.gate import SchemaGate, check_syntax
from .schema.validators import SchemaValidator
from .writer import WriteCoordinator


class YamlFile:
    """Handle for a single YAML document identified by a path or URL.

    The handle holds no document state: every call goes back to storage.
    """

    def __init__(
        self,
        path: str,
        fetcher: Optional[ContentFetcher] = None,
        logger: Optional[logging.Logger] = None,
        *,
        config: Optional[FileStoreConfig] = None,
        validator: Optional[SchemaValidator] = None,
    ):
        """Initialize YAML file handle.

        Args:
            path: Path to a manifest or lock file, or an http(s) URL
            fetcher: Fetcher used by read(); required for http(s) URLs
            logger: Receives "Reading <path>" when enabled for DEBUG
            config: Retry and schema settings. If None, uses global config.
            validator: Schema validation engine. If None, validation always passes.

        Raises:
            ArgumentError: If path is an http(s) URL and no fetcher is given
        """
        path = str(path)
        if fetcher is None and is_remote_path(path):
            raise ArgumentError("http urls require a fetcher instance to be passed")

        self._path = path
        self.fetcher = fetcher if fetcher is not None else LocalFetch(logger)
        self.logger = logger
        self.config = config if config is not None else store_config
        self._writer = WriteCoordinator(self.config)
        self._schema_gate = SchemaGate(validator, self.config)

    @property
    def path(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._path!r})"

    def exists(self) -> bool:
        """Check whether the file exists on local storage."""
        return Path(self._path).is_file()

    def read(self) -> Any:
        """Read and decode the document.

        Returns:
            Decoded document, or None if the source is empty

        Raises:
            FileReadError: If the content cannot be fetched
            YamlParsingError: If the content is not valid YAML
        """
        try:
            content = self.fetcher.fetch(self._path)
        except TransportError as exc:
            raise FileReadError(str(exc), path=self._path) from exc
        except Exception as exc:
            raise FileReadError(f"Could not read {self._path}\n\n{exc}", path=self._path) from exc

        if not content:
            return None

        return self.decode(content, self._path)

    def write(self, data: Any, options: Optional[EncodeOptions] = None) -> None:
        """Encode and write the document.

        Args:
            data: Document to write
            options: EncodeOptions or legacy integer flags (default 448, all set)

        Raises:
            YamlEncodingError: If data cannot be represented as YAML
            DirectoryError: If the parent directory cannot be used or created
            OSError: If every write attempt fails
        """
        self._writer.write(self._path, self.encode(data, options))

    def validate_schema(self, schema: SchemaMode = SchemaMode.STRICT, schema_file: Optional[str] = None) -> bool:
        """Validate the local file against a JSON Schema.

        Args:
            schema: SchemaMode.STRICT or SchemaMode.LAX
            schema_file: Path or URI of the schema. If None, uses the bundled manifest schema.

        Returns:
            True on success. With the default validator this is always the case
            for a file that parses.

        Raises:
            FileReadError: If the file cannot be read
            YamlParsingError: If the file is not valid YAML
            SchemaValidationError: If a configured validator rejects the document
        """
        content = self._read_local()
        data = self.decode(content, self._path)
        if data is None and content != "null":
            check_syntax(content, self._path)

        return self._schema_gate.validate(data, schema, schema_file)

    def _read_local(self) -> str:
        try:
            return Path(self._path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(f"Could not read {self._path}\n\n{exc}", path=self._path) from exc

    @staticmethod
    def encode(data: Any, options: Optional[EncodeOptions] = None) -> str:
        """Encode data into YAML text."""
        return YamlCodec.encode(data, options)

    @staticmethod
    def decode(content: Optional[str], path: Optional[str] = None) -> Any:
        """Decode YAML text; None decodes to None."""
        return YamlCodec.decode(content, path)
