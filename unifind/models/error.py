# Path: unifind/models/error.py
"""
Parser Diagnostics

Non-fatal error classification for NamesList parsing.

A diagnostic never aborts a parse: the offending line or record is
skipped and parsing continues. Diagnostics are logged when found and
accumulated in an ErrorCollection returned with the search result.

This module defines:
- Error severity levels (ERROR, WARNING)
- Error categories
- ParsingError records with line context
- ErrorCollection with per-category counts
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional


# ==============================================================================
# ERROR SEVERITY LEVELS
# ==============================================================================

class ErrorSeverity(Enum):
    """
    Diagnostic severity classification.

    Levels:
        ERROR: Record dropped (e.g., unparseable code point)
        WARNING: Line skipped (e.g., wrong field count)
    """
    ERROR = "ERROR"
    WARNING = "WARNING"

    def __str__(self) -> str:
        return self.value

    @property
    def log_level(self) -> int:
        """Matching logging level."""
        return {
            ErrorSeverity.ERROR: logging.ERROR,
            ErrorSeverity.WARNING: logging.WARNING,
        }[self]


# ==============================================================================
# ERROR CATEGORIES
# ==============================================================================

class ErrorCategory(Enum):
    """Diagnostic category classification."""
    MALFORMED_LINE = "MALFORMED_LINE"
    INVALID_CODE_POINT = "INVALID_CODE_POINT"
    ORPHAN_CONTINUATION = "ORPHAN_CONTINUATION"

    def __str__(self) -> str:
        return self.value


# ==============================================================================
# PARSING ERROR CLASS
# ==============================================================================

@dataclass
class ParsingError:
    """
    One non-fatal parser finding.

    Attributes:
        severity: Error severity level
        category: Error category
        message: Human-readable error message
        line_number: 1-based line number in the document (optional)
        text: Offending text (optional)
    """
    severity: ErrorSeverity
    category: ErrorCategory
    message: str
    line_number: Optional[int] = None
    text: Optional[str] = None

    def __str__(self) -> str:
        """String representation for logging."""
        parts = [f"[{self.severity.value}] {self.category.value}: {self.message}"]

        if self.line_number is not None:
            parts.append(f"Line: {self.line_number}")

        if self.text is not None:
            parts.append(f"Text: {self.text!r}")

        return " | ".join(parts)


# ==============================================================================
# ERROR COLLECTION
# ==============================================================================

@dataclass
class ErrorCollection:
    """
    Collection of parser diagnostics.

    Attributes:
        errors: list of parsing errors
    """
    errors: list[ParsingError] = field(default_factory=list)

    def add(self, error: ParsingError) -> None:
        """Add error to collection."""
        self.errors.append(error)

    def count_by_category(self) -> dict[ErrorCategory, int]:
        """Count errors by category."""
        counts = {}
        for error in self.errors:
            counts[error.category] = counts.get(error.category, 0) + 1
        return counts

    def __len__(self) -> int:
        return len(self.errors)

    def __bool__(self) -> bool:
        return len(self.errors) > 0

    def __iter__(self) -> Iterator[ParsingError]:
        return iter(self.errors)


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================

def create_malformed_line(
    line_number: int, text: str, field_count: int, expected: int
) -> ParsingError:
    """Create WARNING for a line with the wrong number of fields."""
    return ParsingError(
        severity=ErrorSeverity.WARNING,
        category=ErrorCategory.MALFORMED_LINE,
        message=f"invalid format, expected {expected} fields, got {field_count}",
        line_number=line_number,
        text=text,
    )


def create_invalid_code_point(line_number: int, text: str) -> ParsingError:
    """Create ERROR for a record whose code point does not parse."""
    return ParsingError(
        severity=ErrorSeverity.ERROR,
        category=ErrorCategory.INVALID_CODE_POINT,
        message=f"invalid code point {text!r}",
        line_number=line_number,
        text=text,
    )


def create_orphan_continuation(line_number: int, text: str) -> ParsingError:
    """Create WARNING for a continuation line with no open record."""
    return ParsingError(
        severity=ErrorSeverity.WARNING,
        category=ErrorCategory.ORPHAN_CONTINUATION,
        message="continuation line before any code point",
        line_number=line_number,
        text=text,
    )


__all__ = [
    'ErrorSeverity',
    'ErrorCategory',
    'ParsingError',
    'ErrorCollection',
    'create_malformed_line',
    'create_invalid_code_point',
    'create_orphan_continuation',
]
