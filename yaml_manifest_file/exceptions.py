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

"""Custom exceptions for YAML manifest file handling."""


class YamlFileError(Exception):
    """Base exception for YAML manifest file errors."""
    pass


class ArgumentError(YamlFileError, ValueError):
    """Exception raised when a file handle is constructed with invalid arguments."""
    pass


class FileReadError(YamlFileError, IOError):
    """Exception raised when a document cannot be read or fetched."""

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path


class TransportError(YamlFileError):
    """Exception raised by remote fetchers when the transport fails."""

    def __init__(self, message: str, url: str = None, status_code: int = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DirectoryError(YamlFileError):
    """Exception raised when the destination directory cannot be prepared."""

    def __init__(self, message: str, directory: str = None):
        super().__init__(message)
        self.directory = directory


class DirectoryOccupiedError(DirectoryError):
    """Exception raised when a non-directory entry occupies the destination directory."""
    pass


class DirectoryCreationError(DirectoryError):
    """Exception raised when the destination directory could not be created."""
    pass


class YamlParsingError(YamlFileError):
    """Exception raised when YAML content cannot be parsed."""

    def __init__(self, message: str, location=None):
        super().__init__(message)
        self.location = location


class SchemaValidationError(YamlFileError):
    """Exception raised when a document does not satisfy its schema."""

    def __init__(self, message: str, issues=None):
        super().__init__(message)
        self.issues = list(issues or [])


class YamlEncodingError(YamlFileError):
    """Exception raised when a document cannot be represented as YAML."""
    pass
