# Path: unifind/core/data_paths.py
"""
Data Paths Manager for unifind

Cache location resolution and directory creation.

Layout:
    <cache root>/unifind/ucd/<document file name>

The cache root is UNIFIND_CACHE_DIR when configured, otherwise the
platform user cache directory (platformdirs).
"""

import posixpath
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import platformdirs

from ..config_loader import ConfigLoader
from ..constants import APP_NAME, UCD_CACHE_SUBDIR
from ..exceptions import CacheUnavailable, DirectoryCreateFailed
from .logger import get_input_logger


class DataPathsManager:
    """
    Resolves cache paths and creates cache directories.

    Example:
        manager = DataPathsManager()
        path = manager.cache_path_for(url)
        manager.ensure_directory(path.parent)
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize the data paths manager with configuration.

        Args:
            config: Optional ConfigLoader instance
        """
        self.config = config if config else ConfigLoader()
        self.logger = get_input_logger('data_paths')

    def cache_root(self) -> Path:
        """
        Base cache directory.

        Returns:
            Configured cache_dir, or the platform user cache directory

        Raises:
            CacheUnavailable: If no absolute cache directory can be determined
        """
        configured = self.config.get('cache_dir')
        if configured is not None:
            return Path(configured)

        try:
            root = Path(platformdirs.user_cache_dir())
        except (OSError, KeyError, RuntimeError) as e:
            raise CacheUnavailable(f"could not find user cache dir: {e}") from e

        # '~' stays unexpanded when no home directory is known
        if not root.is_absolute():
            raise CacheUnavailable(f"could not find user cache dir: got {root}", path=root)

        return root

    def document_cache_dir(self) -> Path:
        """Directory holding cached UCD documents."""
        return self.cache_root() / APP_NAME / UCD_CACHE_SUBDIR

    def cache_path_for(self, identifier: str) -> Path:
        """
        Cache file path for a document URL or name.

        The file name is the final path segment of the identifier.

        Args:
            identifier: URL or plain document name

        Returns:
            Path inside document_cache_dir()

        Raises:
            CacheUnavailable: If the identifier has no final path segment
        """
        file_name = posixpath.basename(urlparse(identifier).path)
        if not file_name:
            raise CacheUnavailable(
                f"could not derive cache file name from {identifier!r}",
                url=identifier,
            )
        return self.document_cache_dir() / file_name

    def ensure_directory(self, path: Path) -> Path:
        """
        Ensure a directory exists, creating parents as needed.

        Args:
            path: Path to directory

        Returns:
            The same path

        Raises:
            DirectoryCreateFailed: If the directory cannot be created
        """
        if path.is_dir():
            return path

        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreateFailed(
                f"could not make cache path {path}: {e}", path=path
            ) from e

        self.logger.debug(f"Created directory {path}")
        return path


__all__ = ['DataPathsManager']
