# Path: unifind/models/__init__.py
"""
unifind Models

Data structures shared by the loaders, parser and output layers.
"""

from .error import (
    ErrorSeverity,
    ErrorCategory,
    ParsingError,
    ErrorCollection,
)
from .names_list import Category, CharacterRecord, SearchResult

__all__ = [
    'ErrorSeverity',
    'ErrorCategory',
    'ParsingError',
    'ErrorCollection',
    'Category',
    'CharacterRecord',
    'SearchResult',
]
