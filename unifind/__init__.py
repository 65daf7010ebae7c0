# Path: unifind/__init__.py
"""
unifind - Unicode Character Finder

Searches the Unicode NamesList.txt reference document for characters
whose names, annotations, block or sub-heading match a free-text query.

Data Flow:
    INPUT:   NamesList.txt (user cache, downloaded once from unicode.org)
    PROCESS: Line classification, record assembly, multi-term matching
    OUTPUT:  Glyphs, code points or descriptions on stdout
"""

__version__ = '0.1.0'

__all__ = ['__version__']
