"""YAML manifest files with optional remote retrieval and schema validation."""

from .codec import YamlCodec
from .config import FileStoreConfig, store_config
from .exceptions import (
    ArgumentError,
    DirectoryCreationError,
    DirectoryError,
    DirectoryOccupiedError,
    FileReadError,
    SchemaValidationError,
    TransportError,
    YamlEncodingError,
    YamlFileError,
    YamlParsingError,
)
from .fetchers import ContentFetcher, LocalFetch, RemoteFetch, is_remote_path
from .options import (
    DEFAULT_FLAGS,
    PRETTY_PRINT,
    UNESCAPED_SLASHES,
    UNESCAPED_UNICODE,
    EncodeOptions,
    SchemaMode,
)
from .writer import WriteCoordinator
from .yaml_file import YamlFile

__all__ = [
    "YamlFile",
    "YamlCodec",
    "WriteCoordinator",
    "ContentFetcher",
    "LocalFetch",
    "RemoteFetch",
    "is_remote_path",
    "EncodeOptions",
    "SchemaMode",
    "DEFAULT_FLAGS",
    "PRETTY_PRINT",
    "UNESCAPED_SLASHES",
    "UNESCAPED_UNICODE",
    "FileStoreConfig",
    "store_config",
    "YamlFileError",
    "ArgumentError",
    "FileReadError",
    "TransportError",
    "DirectoryError",
    "DirectoryOccupiedError",
    "DirectoryCreationError",
    "YamlParsingError",
    "YamlEncodingError",
    "SchemaValidationError",
]
