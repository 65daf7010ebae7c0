# Path: unifind/output/__init__.py
"""
unifind Output Layer

Renders search results on stdout in the mode selected by the command line.
"""

from .formatters import BaseFormatter, FormatterRegistry

__all__ = ['BaseFormatter', 'FormatterRegistry']
