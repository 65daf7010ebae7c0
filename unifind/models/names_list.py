# Path: unifind/models/names_list.py
"""
NamesList Data Models

Data structures for the records of the Unicode NamesList.txt document.

Hierarchy:
    Category (block header '@@')
      -> Subcategory (sub-heading '@')
        -> CharacterRecord (code point + description block)
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..constants import CODE_POINT_MIN_DIGITS
from .error import ErrorCollection


@dataclass(frozen=True)
class Category:
    """
    A block of characters as declared by a '@@' header line.

    Boundaries are kept as given in the document (hex text, not validated).

    Attributes:
        name: Block name (e.g., 'Basic Latin')
        start: First code point of the block, hex text
        end: Last code point of the block, hex text
        description: Text of the '@+' lines following the header
    """
    name: str = ''
    start: str = ''
    end: str = ''
    description: str = ''

    def with_description(self, text: str) -> 'Category':
        """Return a copy with `text` appended to the description."""
        description = f"{self.description}\n{text}" if self.description else text
        return Category(self.name, self.start, self.end, description)


@dataclass(frozen=True)
class CharacterRecord:
    """
    One character entry of the NamesList document.

    Attributes:
        code_point: Integer code point
        description: Lower-cased description lines, name first
        category: Category in effect when the record was declared
        subcategory: Subcategory in effect when the record was declared
        line_number: Line that declared the code point
    """
    code_point: int
    description: tuple[str, ...]
    category: Category
    subcategory: str = ''
    line_number: Optional[int] = None

    @property
    def character(self) -> str:
        """The character itself."""
        return chr(self.code_point)

    @property
    def name(self) -> str:
        """Primary description line (the lower-cased character name)."""
        return self.description[0] if self.description else ''

    @property
    def notation(self) -> str:
        """Canonical code point notation, e.g. 'U+0041'."""
        return f"U+{self.code_point:0{CODE_POINT_MIN_DIGITS}X}"


@dataclass
class SearchResult:
    """
    Accepted records for one query, in document order.

    Attributes:
        query: Query text as supplied by the caller
        records: Accepted records
        errors: Non-fatal diagnostics collected while parsing
    """
    query: str
    records: list[CharacterRecord] = field(default_factory=list)
    errors: ErrorCollection = field(default_factory=ErrorCollection)

    def categories(self) -> list[str]:
        """Distinct category names among the records, sorted."""
        return sorted({record.category.name for record in self.records})

    def __len__(self) -> int:
        return len(self.records)

    def __bool__(self) -> bool:
        return len(self.records) > 0

    def __iter__(self) -> Iterator[CharacterRecord]:
        return iter(self.records)


__all__ = ['Category', 'CharacterRecord', 'SearchResult']
