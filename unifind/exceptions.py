# Path: unifind/exceptions.py
"""
Fatal Error Hierarchy

Exceptions that abort a search and propagate to the command layer.

Non-fatal parser findings (malformed lines, bad code points) are NOT
exceptions; they are collected as ParsingError records, see
models/error.py.
"""

from pathlib import Path
from typing import Optional


class UnifindError(Exception):
    """Base exception for all unifind errors."""


# ==============================================================================
# DOCUMENT PROVIDER ERRORS
# ==============================================================================

class DocumentProviderError(UnifindError):
    """
    Base for failures while obtaining the reference document.

    Attributes:
        path: Local cache path involved, if any
        url: Source URL involved, if any
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        url: Optional[str] = None,
    ):
        super().__init__(message)
        self.path = path
        self.url = url


class CacheUnavailable(DocumentProviderError):
    """The user cache directory (or a cache file name) cannot be determined."""


class DirectoryCreateFailed(DocumentProviderError):
    """The cache directory cannot be created."""


class FetchFailed(DocumentProviderError):
    """Network retrieval of the document failed."""


class CacheWriteFailed(DocumentProviderError):
    """The local copy cannot be written or read back."""


# ==============================================================================
# CALLER-LEVEL ERRORS
# ==============================================================================

class MissingQuery(UnifindError):
    """No query term was supplied and match-all was not requested."""


class NoMatches(UnifindError):
    """The search completed but accepted no records."""

    def __init__(self, query: str):
        super().__init__(f"No characters match {query!r}")
        self.query = query


__all__ = [
    'UnifindError',
    'DocumentProviderError',
    'CacheUnavailable',
    'DirectoryCreateFailed',
    'FetchFailed',
    'CacheWriteFailed',
    'MissingQuery',
    'NoMatches',
]
