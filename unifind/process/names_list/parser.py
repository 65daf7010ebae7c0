# Path: unifind/process/names_list/parser.py
"""
NamesList Parser

Single-pass state machine over NamesList.txt lines.

States:
    no record open  --data line with code-->    record open (capture)
    record open     --data line with code-->    record open (finalize old, capture new)
    record open     --data line, empty code-->  record open (append description)
    any             --header / marker line-->   same state, category context updated
    record open     --end of input-->           finalize

A record is evaluated against the query only when finalized, i.e.
after its whole description block has been read, and at most once.
Malformed lines and bad code points are reported and skipped; they
never abort the parse.
"""

import re
from dataclasses import dataclass, field
from typing import BinaryIO, Callable, Iterable, Optional

from ...constants import (
    CATEGORY_HEADER_FIELD_COUNT,
    CODE_POINT_PATTERN,
    DATA_LINE_FIELD_COUNT,
    DOCUMENT_ENCODING,
    EXCLUDED_CATEGORIES,
    FIELD_SEPARATOR,
    MAX_CODE_POINT,
)
from ...core.logger import get_process_logger
from ...models.error import (
    ErrorCollection,
    ParsingError,
    create_invalid_code_point,
    create_malformed_line,
    create_orphan_continuation,
)
from ...models.names_list import Category, CharacterRecord, SearchResult
from .line_classifier import ClassifiedLine, LineKind, classify_line
from .query import Query

_CODE_POINT_RE = re.compile(CODE_POINT_PATTERN)


@dataclass
class OpenRecord:
    """
    A record whose description block is still being read.

    Attributes:
        code_text: Code point field as written in the document
        line_number: Line that opened the record
        description: Lower-cased description lines so far
        category: Category snapshot at open time
        subcategory: Subcategory snapshot at open time
    """
    code_text: str
    line_number: int
    description: list[str]
    category: Category
    subcategory: str


@dataclass
class ParserState:
    """
    Mutable state owned by one parse loop.

    Attributes:
        category: Current category
        subcategory: Current subcategory
        open_record: Record being assembled, or None
        results: Accepted records, in document order
        errors: Diagnostics collected so far
        evaluated: Number of records finalized
        excluded_lines: Data lines skipped by the exclusion table
    """
    category: Category = field(default_factory=Category)
    subcategory: str = ''
    open_record: Optional[OpenRecord] = None
    results: list[CharacterRecord] = field(default_factory=list)
    errors: ErrorCollection = field(default_factory=ErrorCollection)
    evaluated: int = 0
    excluded_lines: int = 0


class NamesListParser:
    """
    Parses NamesList.txt and collects records accepted by a query.

    Example:
        parser = NamesListParser()
        with open('NamesList.txt', 'rb') as stream:
            result = parser.parse(stream, Query.parse('capital a'))
        for record in result:
            print(record.character, record.name)
    """

    def __init__(self, excluded_categories: Iterable[str] = EXCLUDED_CATEGORIES):
        """
        Initialize parser.

        Args:
            excluded_categories: Category names whose records are skipped
        """
        self.excluded_categories = frozenset(excluded_categories)
        self.logger = get_process_logger('names_list_parser')

        self._handlers: dict[LineKind, Callable[[ParserState, ClassifiedLine, Query], None]] = {
            LineKind.SUBCATEGORY: self._on_subcategory,
            LineKind.CATEGORY_HEADER: self._on_category_header,
            LineKind.CATEGORY_DESCRIPTION: self._on_category_description,
            LineKind.COMMENT: self._on_comment,
            LineKind.DATA: self._on_data,
        }

    def parse(self, stream: BinaryIO, query: Query) -> SearchResult:
        """
        Parse a binary NamesList stream.

        Args:
            stream: Binary file object positioned at the start
            query: Parsed query

        Returns:
            SearchResult with accepted records and diagnostics
        """
        lines = (raw.decode(DOCUMENT_ENCODING, errors='replace') for raw in stream)
        return self.parse_lines(lines, query)

    def parse_lines(self, lines: Iterable[str], query: Query) -> SearchResult:
        """
        Parse NamesList lines.

        Args:
            lines: Lines, with or without trailing line terminators
            query: Parsed query

        Returns:
            SearchResult with accepted records and diagnostics
        """
        state = ParserState()
        line_count = 0

        for line_number, line in enumerate(lines, 1):
            line_count = line_number
            classified = classify_line(line.rstrip('\r\n'), line_number)
            self._handlers[classified.kind](state, classified, query)

        self._finalize(state, query)

        self.logger.info(
            f"Parsed {line_count} lines: {state.evaluated} records evaluated, "
            f"{len(state.results)} matched, {state.excluded_lines} excluded lines, "
            f"{len(state.errors)} diagnostics"
        )

        return SearchResult(query=query.text, records=state.results, errors=state.errors)

    def is_excluded(self, category: Category) -> bool:
        """True when records of `category` are never searched."""
        return category.name in self.excluded_categories

    # ==========================================================================
    # LINE HANDLERS
    # ==========================================================================

    def _on_subcategory(self, state: ParserState, line: ClassifiedLine, query: Query) -> None:
        state.subcategory = line.payload

    def _on_category_header(self, state: ParserState, line: ClassifiedLine, query: Query) -> None:
        parts = line.payload.split(FIELD_SEPARATOR)
        if len(parts) < CATEGORY_HEADER_FIELD_COUNT:
            self._report(state, create_malformed_line(
                line.line_number, line.payload, len(parts), CATEGORY_HEADER_FIELD_COUNT
            ))
            return

        _, start, name, end = parts[:CATEGORY_HEADER_FIELD_COUNT]
        state.category = Category(name=name, start=start, end=end)
        state.subcategory = ''

    def _on_category_description(
        self, state: ParserState, line: ClassifiedLine, query: Query
    ) -> None:
        state.category = state.category.with_description(line.payload)

    def _on_comment(self, state: ParserState, line: ClassifiedLine, query: Query) -> None:
        pass

    def _on_data(self, state: ParserState, line: ClassifiedLine, query: Query) -> None:
        if self.is_excluded(state.category):
            state.excluded_lines += 1
            return

        parts = line.payload.split(FIELD_SEPARATOR)
        if len(parts) != DATA_LINE_FIELD_COUNT:
            self._report(state, create_malformed_line(
                line.line_number, line.payload, len(parts), DATA_LINE_FIELD_COUNT
            ))
            return

        code_text, text = parts

        if code_text:
            self._finalize(state, query)
            state.open_record = OpenRecord(
                code_text=code_text,
                line_number=line.line_number,
                description=[text.lower()],
                category=state.category,
                subcategory=state.subcategory,
            )
            return

        if state.open_record is None:
            self._report(state, create_orphan_continuation(line.line_number, line.payload))
            return

        state.open_record.description.append(text.lower())

    # ==========================================================================
    # RECORD EVALUATION
    # ==========================================================================

    def _finalize(self, state: ParserState, query: Query) -> None:
        """Close the open record, if any, and evaluate it."""
        open_record = state.open_record
        if open_record is None:
            return
        state.open_record = None
        state.evaluated += 1

        code_point = self._parse_code_point(open_record.code_text)
        if code_point is None:
            self._report(state, create_invalid_code_point(
                open_record.line_number, open_record.code_text
            ))
            return

        record = CharacterRecord(
            code_point=code_point,
            description=tuple(open_record.description),
            category=open_record.category,
            subcategory=open_record.subcategory,
            line_number=open_record.line_number,
        )

        if query.accepts(record):
            state.results.append(record)

    def _parse_code_point(self, text: str) -> Optional[int]:
        """Parse hex code point text; None when invalid or out of range."""
        if not _CODE_POINT_RE.fullmatch(text):
            return None
        value = int(text, 16)
        if value > MAX_CODE_POINT:
            return None
        return value

    def _report(self, state: ParserState, error: ParsingError) -> None:
        state.errors.add(error)
        self.logger.log(error.severity.log_level, str(error))


__all__ = ['OpenRecord', 'ParserState', 'NamesListParser']
