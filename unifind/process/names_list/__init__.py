# Path: unifind/process/names_list/__init__.py
"""
NamesList Parsing and Matching

Components:
    - classify_line: Tags each raw line with its line class
    - NamesListParser: State machine assembling character records
    - Query: Multi-term AND match predicate

Example:
    from unifind.process.names_list import NamesListParser, Query

    parser = NamesListParser()
    result = parser.parse_lines(lines, Query.parse('greek alpha'))
"""

from .line_classifier import LineKind, ClassifiedLine, classify_line
from .parser import NamesListParser, ParserState, OpenRecord
from .query import Query

__all__ = [
    'LineKind',
    'ClassifiedLine',
    'classify_line',
    'NamesListParser',
    'ParserState',
    'OpenRecord',
    'Query',
]
