# Path: unifind/process/names_list/line_classifier.py
"""
NamesList Line Classifier

Maps one raw NamesList line to a tagged line class. No parser state is
involved, so classification is testable without any I/O.

Line classes (tested in this order):
    '@\\t\\t'   SUBCATEGORY           payload: sub-heading text
    '@@\\t'    CATEGORY_HEADER       payload: whole line
    '@+\\t\\t'  CATEGORY_DESCRIPTION  payload: description text
    ';', '@', '\\t\\t', blank
              COMMENT               payload: whole line
    otherwise DATA                  payload: whole line
"""

from dataclasses import dataclass
from enum import Enum

from ...constants import (
    SUBCATEGORY_PREFIX,
    CATEGORY_HEADER_PREFIX,
    CATEGORY_DESCRIPTION_PREFIX,
    COMMENT_PREFIX,
    DIRECTIVE_PREFIX,
    INDENTED_NOTE_PREFIX,
)


class LineKind(str, Enum):
    """NamesList line classes."""
    SUBCATEGORY = 'subcategory'
    CATEGORY_HEADER = 'category_header'
    CATEGORY_DESCRIPTION = 'category_description'
    COMMENT = 'comment'
    DATA = 'data'


@dataclass(frozen=True)
class ClassifiedLine:
    """
    A raw line tagged with its class.

    Attributes:
        kind: Line class
        payload: Text after the class prefix (SUBCATEGORY,
            CATEGORY_DESCRIPTION) or the whole line (other classes)
        line_number: 1-based line number
    """
    kind: LineKind
    payload: str
    line_number: int


def classify_line(line: str, line_number: int = 0) -> ClassifiedLine:
    """
    Classify a NamesList line.

    Args:
        line: Line text without the line terminator
        line_number: 1-based line number, carried for diagnostics

    Returns:
        ClassifiedLine
    """
    if line.startswith(SUBCATEGORY_PREFIX):
        return ClassifiedLine(
            LineKind.SUBCATEGORY, line[len(SUBCATEGORY_PREFIX):], line_number
        )

    if line.startswith(CATEGORY_HEADER_PREFIX):
        return ClassifiedLine(LineKind.CATEGORY_HEADER, line, line_number)

    if line.startswith(CATEGORY_DESCRIPTION_PREFIX):
        return ClassifiedLine(
            LineKind.CATEGORY_DESCRIPTION,
            line[len(CATEGORY_DESCRIPTION_PREFIX):],
            line_number,
        )

    if (
        not line.strip()
        or line.startswith(COMMENT_PREFIX)
        or line.startswith(DIRECTIVE_PREFIX)
        or line.startswith(INDENTED_NOTE_PREFIX)
    ):
        return ClassifiedLine(LineKind.COMMENT, line, line_number)

    return ClassifiedLine(LineKind.DATA, line, line_number)


__all__ = ['LineKind', 'ClassifiedLine', 'classify_line']
