# Path: unifind/constants.py
"""
System-Wide Constants for unifind

Central repository for all constant values used across the system.
NO HARDCODED VALUES in module code - all constants defined here.

Constants are organized by category:
- Application Identity
- Source Documents
- NamesList Line Prefixes
- Category Exclusion Table
- Code Points
- Exit Codes
- Display
"""

from typing import Final


# ==============================================================================
# APPLICATION IDENTITY
# ==============================================================================

APP_NAME: Final[str] = 'unifind'

# Cache sub-directory under <user cache dir>/unifind/
UCD_CACHE_SUBDIR: Final[str] = 'ucd'


# ==============================================================================
# SOURCE DOCUMENTS
# ==============================================================================

UNICODE_NAMES_LIST_URL: Final[str] = (
    'https://www.unicode.org/Public/UCD/latest/ucd/NamesList.txt'
)

DOCUMENT_ENCODING: Final[str] = 'utf-8'


# ==============================================================================
# NAMESLIST LINE PREFIXES
# ==============================================================================

# Order matters: the sub-heading prefix is tested before the generic '@'.
SUBCATEGORY_PREFIX: Final[str] = '@\t\t'
CATEGORY_HEADER_PREFIX: Final[str] = '@@\t'
CATEGORY_DESCRIPTION_PREFIX: Final[str] = '@+\t\t'

COMMENT_PREFIX: Final[str] = ';'
DIRECTIVE_PREFIX: Final[str] = '@'
INDENTED_NOTE_PREFIX: Final[str] = '\t\t'

FIELD_SEPARATOR: Final[str] = '\t'

# Data lines: code point (or empty) + text
DATA_LINE_FIELD_COUNT: Final[int] = 2

# Category header: marker, start, name, end
CATEGORY_HEADER_FIELD_COUNT: Final[int] = 4


# ==============================================================================
# CATEGORY EXCLUSION TABLE
# ==============================================================================

# Blocks whose records are never searched. Add names here to extend.
EXCLUDED_CATEGORIES: Final[frozenset[str]] = frozenset({
    'Sutton SignWriting',
    'Runic',
    'Coptic',
})


# ==============================================================================
# CODE POINTS
# ==============================================================================

MAX_CODE_POINT: Final[int] = 0x10FFFF
CODE_POINT_PATTERN: Final[str] = r'[0-9A-Fa-f]+'
CODE_POINT_MIN_DIGITS: Final[int] = 4


# ==============================================================================
# EXIT CODES
# ==============================================================================

EXIT_OK: Final[int] = 0
EXIT_FAILURE: Final[int] = 1
EXIT_USAGE: Final[int] = 2
EXIT_INTERRUPTED: Final[int] = 130


# ==============================================================================
# DISPLAY
# ==============================================================================

NOT_FOUND_MESSAGE: Final[str] = 'Not found'

STATUS_FAIL: Final[str] = '[FAIL]'


__all__ = [
    # Identity
    'APP_NAME',
    'UCD_CACHE_SUBDIR',

    # Documents
    'UNICODE_NAMES_LIST_URL',
    'DOCUMENT_ENCODING',

    # Prefixes
    'SUBCATEGORY_PREFIX',
    'CATEGORY_HEADER_PREFIX',
    'CATEGORY_DESCRIPTION_PREFIX',
    'COMMENT_PREFIX',
    'DIRECTIVE_PREFIX',
    'INDENTED_NOTE_PREFIX',
    'FIELD_SEPARATOR',
    'DATA_LINE_FIELD_COUNT',
    'CATEGORY_HEADER_FIELD_COUNT',

    # Exclusion
    'EXCLUDED_CATEGORIES',

    # Code points
    'MAX_CODE_POINT',
    'CODE_POINT_PATTERN',
    'CODE_POINT_MIN_DIGITS',

    # Exit codes
    'EXIT_OK',
    'EXIT_FAILURE',
    'EXIT_USAGE',
    'EXIT_INTERRUPTED',

    # Display
    'NOT_FOUND_MESSAGE',
    'STATUS_FAIL',
]
