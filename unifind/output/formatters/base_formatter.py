# Path: unifind/output/formatters/base_formatter.py
"""
Base Formatter and Formatter Registry

Abstract base class for result formatters and a registry
to look them up by mode name.

To add a new output mode:
1. Subclass BaseFormatter
2. Implement format_result()
3. Register via FormatterRegistry.register()
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, TextIO, Type

from ...core.logger import get_output_logger
from ...models.names_list import SearchResult


class BaseFormatter(ABC):
    """
    Abstract base for result formatters.

    Each subclass renders a SearchResult as lines of text.
    """

    def __init__(self):
        self.logger = get_output_logger(self.format_name)

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Short name for this mode (e.g., 'glyph', 'code')."""

    @abstractmethod
    def format_result(self, result: SearchResult) -> list[str]:
        """
        Render result to lines.

        Args:
            result: SearchResult to render

        Returns:
            Output lines without terminators
        """

    def write_result(self, result: SearchResult, stream: TextIO) -> int:
        """
        Write rendered lines to a text stream.

        Args:
            result: SearchResult to render
            stream: Destination (usually sys.stdout)

        Returns:
            Number of lines written
        """
        lines = self.format_result(result)
        for line in lines:
            stream.write(f"{line}\n")
        self.logger.debug(f"Wrote {len(lines)} lines")
        return len(lines)


class FormatterRegistry:
    """
    Registry of available formatters.

    Lookup by mode name. The command layer uses this to find
    the formatter selected by its flags.
    """

    _formatters: Dict[str, Type[BaseFormatter]] = {}

    @classmethod
    def register(cls, formatter_class: Type[BaseFormatter]) -> None:
        """Register a formatter class."""
        instance = formatter_class()
        name = instance.format_name
        cls._formatters[name] = formatter_class

    @classmethod
    def get(cls, format_name: str) -> Optional[BaseFormatter]:
        """Get a formatter instance by name."""
        formatter_class = cls._formatters.get(format_name)
        if formatter_class:
            return formatter_class()
        return None


__all__ = ['BaseFormatter', 'FormatterRegistry']
