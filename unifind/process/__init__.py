# Path: unifind/process/__init__.py
"""
unifind Process Layer

Parsing NamesList.txt and matching character records.

Core Components:
    - names_list: Line classification, parser state machine, query predicate
    - search: CharacterSearch, composing document provider and parser
"""

from .search import CharacterSearch

__all__ = ['CharacterSearch']
