# Path: unifind/loaders/__init__.py
"""
unifind Loaders

INPUT layer: obtaining the NamesList document.

- http_fetcher.py: RETRIEVES documents over HTTP (retry, pooling)
- document_provider.py: CACHES them under the user cache directory
"""

from .http_fetcher import HTTPFetcher
from .document_provider import DocumentProvider

__all__ = ['HTTPFetcher', 'DocumentProvider']
