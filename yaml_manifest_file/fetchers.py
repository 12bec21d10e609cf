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

"""Retrieval of raw manifest content from local storage or over HTTP."""

import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import requests

from .config import store_config
from .exceptions import TransportError

logger = logging.getLogger(__name__)

_REMOTE_PATH_RE = re.compile(r"^https?://", re.IGNORECASE)


def is_remote_path(path: str) -> bool:
    """Return True if path is an http(s) URL."""
    return bool(_REMOTE_PATH_RE.match(str(path)))


class ContentFetcher(ABC):
    """Abstract source of raw document text."""

    @abstractmethod
    def fetch(self, path: str) -> Optional[str]:
        """Return the raw content stored at path."""


class LocalFetch(ContentFetcher):
    """Read documents from the local filesystem.

    The optional logger is the caller's debug side channel; it receives
    "Reading <path>" only when enabled for DEBUG.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger

    def fetch(self, path: str) -> Optional[str]:
        if self.logger is not None and self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"Reading {path}")
        return Path(path).read_text(encoding="utf-8")


class RemoteFetch(ContentFetcher):
    """Fetch documents over HTTP(S) with requests."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        """Initialize remote fetcher.

        Args:
            session: Session used for requests, owned by the caller. If None,
                each fetch is a plain requests.get call.
            timeout: Request timeout in seconds. If None, uses global config.
        """
        self.session = session
        self.timeout = timeout if timeout is not None else store_config.fetch_timeout

    def fetch(self, path: str) -> Optional[str]:
        logger.debug(f"Fetching {path}")
        client = self.session if self.session is not None else requests
        try:
            response = client.get(path, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as exc:
            status_code = getattr(exc.response, "status_code", None)
            raise TransportError(
                f"The \"{path}\" file could not be downloaded ({status_code})",
                url=path,
                status_code=status_code,
            ) from exc
        except requests.exceptions.RequestException as exc:
            raise TransportError(
                f"The \"{path}\" file could not be downloaded: {exc}",
                url=path,
            ) from exc

        return response.text
