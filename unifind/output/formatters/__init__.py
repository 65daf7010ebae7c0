# Path: unifind/output/formatters/__init__.py
"""
Result Formatters

Each formatter renders a SearchResult for one output mode.
Formatters know nothing about parsing; new modes add new
formatters without touching the search.
"""

from .base_formatter import BaseFormatter, FormatterRegistry
from .text_formatters import (
    GlyphFormatter,
    CodePointFormatter,
    VerboseFormatter,
    DetailFormatter,
    CategoryFormatter,
)

for _formatter_class in (
    GlyphFormatter,
    CodePointFormatter,
    VerboseFormatter,
    DetailFormatter,
    CategoryFormatter,
):
    FormatterRegistry.register(_formatter_class)

__all__ = [
    'BaseFormatter',
    'FormatterRegistry',
    'GlyphFormatter',
    'CodePointFormatter',
    'VerboseFormatter',
    'DetailFormatter',
    'CategoryFormatter',
]
