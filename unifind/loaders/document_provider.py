# Path: unifind/loaders/document_provider.py
"""
Document Provider

Supplies a readable byte stream for a UCD document, using the local
cache when present and falling back to network retrieval.

Flow:
    cache hit  -> open cached file
    cache miss -> create cache dir -> download -> write cache -> open it

The cache is written to a temporary file in the cache directory and
moved into place with os.replace, so a cache file is either absent or
complete.
"""

import os
import tempfile
from pathlib import Path
from typing import BinaryIO, Optional

import requests

from ..config_loader import ConfigLoader
from ..core.data_paths import DataPathsManager
from ..core.logger import get_input_logger
from ..exceptions import CacheWriteFailed, FetchFailed
from .http_fetcher import HTTPFetcher


class DocumentProvider:
    """
    Cache-or-fetch provider for reference documents.

    Example:
        provider = DocumentProvider()
        with provider.fetch(config.get('names_list_url')) as stream:
            for raw_line in stream:
                ...
    """

    def __init__(
        self,
        config: Optional[ConfigLoader] = None,
        paths: Optional[DataPathsManager] = None,
        fetcher: Optional[HTTPFetcher] = None,
    ):
        """
        Initialize document provider.

        Args:
            config: Optional ConfigLoader instance
            paths: Optional DataPathsManager (cache location)
            fetcher: Optional HTTPFetcher (network retrieval)
        """
        self.config = config if config else ConfigLoader()
        self.paths = paths if paths else DataPathsManager(self.config)
        self.fetcher = fetcher if fetcher else HTTPFetcher(self.config)
        self.logger = get_input_logger('document_provider')

        # Statistics
        self.hits = 0
        self.misses = 0

    def fetch(self, identifier: str) -> BinaryIO:
        """
        Open the document named by `identifier`.

        Args:
            identifier: Canonical URL of the document

        Returns:
            Binary file object positioned at the start; caller closes it

        Raises:
            CacheUnavailable: User cache directory cannot be determined
            DirectoryCreateFailed: Cache directory cannot be created
            FetchFailed: Network retrieval failed
            CacheWriteFailed: Local copy cannot be written or read back
        """
        cache_path = self.paths.cache_path_for(identifier)

        cached = self._open_cached(cache_path)
        if cached is not None:
            self.hits += 1
            self.logger.debug(f"Cache hit: {cache_path}")
            return cached

        self.misses += 1
        self.logger.info(f"Cache miss: {cache_path}, downloading {identifier}")

        self.paths.ensure_directory(cache_path.parent)

        try:
            content = self.fetcher.fetch(identifier)
        except requests.exceptions.RequestException as e:
            raise FetchFailed(
                f"could not fetch {identifier!r}: {e}", url=identifier
            ) from e

        self._write_atomic(cache_path, content)

        try:
            return open(cache_path, 'rb')
        except OSError as e:
            raise CacheWriteFailed(
                f"could not read back {cache_path}: {e}", path=cache_path
            ) from e

    def _open_cached(self, cache_path: Path) -> Optional[BinaryIO]:
        """Open the cached copy, or return None when there is none."""
        try:
            return open(cache_path, 'rb')
        except FileNotFoundError:
            return None
        except OSError as e:
            raise CacheWriteFailed(
                f"could not open file {str(cache_path)!r}: {e}", path=cache_path
            ) from e

    def _write_atomic(self, cache_path: Path, content: bytes) -> None:
        """Write content to cache_path via a temporary file in the same directory."""
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                mode='wb',
                dir=cache_path.parent,
                prefix=f'.{cache_path.name}.',
                suffix='.part',
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(content)
            os.replace(tmp_name, cache_path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise CacheWriteFailed(
                f"could not download to {str(cache_path)!r}: {e}", path=cache_path
            ) from e

        self.logger.info(f"Cached {len(content)} bytes at {cache_path}")


__all__ = ['DocumentProvider']
