# Path: unifind/output/formatters/text_formatters.py
"""
Text Formatters

One formatter per output mode:

    glyph       character alone (default)
    code        code point notation, e.g. U+0041           (-c)
    verbose     character + name                           (-v)
    detail      character + quoted name/category fields    (-vv)
    categories  sorted distinct category names             (--cats)
"""

import json

from ...models.names_list import CharacterRecord, SearchResult
from .base_formatter import BaseFormatter


def quote(value: str) -> str:
    """Double-quote a value, escaping quotes, backslashes and controls."""
    return json.dumps(value, ensure_ascii=False)


class GlyphFormatter(BaseFormatter):
    """Renders each matched character alone."""

    @property
    def format_name(self) -> str:
        return 'glyph'

    def format_result(self, result: SearchResult) -> list[str]:
        return [record.character for record in result]


class CodePointFormatter(BaseFormatter):
    """Renders each match as U+XXXX."""

    @property
    def format_name(self) -> str:
        return 'code'

    def format_result(self, result: SearchResult) -> list[str]:
        return [record.notation for record in result]


class VerboseFormatter(BaseFormatter):
    """Renders character and primary description."""

    @property
    def format_name(self) -> str:
        return 'verbose'

    def format_result(self, result: SearchResult) -> list[str]:
        return [f"{record.character} {record.name}" for record in result]


class DetailFormatter(BaseFormatter):
    """Renders character with name, category, subcategory and block range."""

    @property
    def format_name(self) -> str:
        return 'detail'

    def format_result(self, result: SearchResult) -> list[str]:
        return [self._render_record(record) for record in result]

    def _render_record(self, record: CharacterRecord) -> str:
        category = record.category
        return (
            f"{record.character} name={quote(record.name)} "
            f"category={quote(category.name)} "
            f"subcategory={quote(record.subcategory)} "
            f"from={quote(category.start)} to={quote(category.end)}"
        )


class CategoryFormatter(BaseFormatter):
    """Renders the sorted distinct category names, one per line."""

    @property
    def format_name(self) -> str:
        return 'categories'

    def format_result(self, result: SearchResult) -> list[str]:
        return result.categories()


__all__ = [
    'quote',
    'GlyphFormatter',
    'CodePointFormatter',
    'VerboseFormatter',
    'DetailFormatter',
    'CategoryFormatter',
]
