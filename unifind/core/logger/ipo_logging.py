# Path: unifind/core/logger/ipo_logging.py
"""
IPO-Aware Logging for unifind

Input-Process-Output separated logging.

Layers:
- INPUT layer (configuration, document provider, HTTP, command line)
- PROCESS layer (NamesList parser, search)
- OUTPUT layer (formatters)

The console handler writes to stderr: stdout carries search results only.
Log files are written only when a log directory is configured.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


LOG_LAYERS: tuple[str, ...] = ('input', 'process', 'output')


class IPOFilter(logging.Filter):
    """Filter logs by IPO layer prefix."""

    def __init__(self, layer: str):
        """
        Initialize filter for specific IPO layer.

        Args:
            layer: 'input', 'process', or 'output'
        """
        super().__init__()
        self.layer = layer

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter records by logger name prefix."""
        return record.name.startswith(self.layer)


def setup_ipo_logging(
    log_dir: Optional[Path] = None,
    log_level: str = 'WARNING',
    console_output: bool = True
) -> None:
    """
    Set up IPO-aware logging for unifind.

    When log_dir is given, creates:
    - input_activity.log (INPUT layer)
    - process_activity.log (PROCESS layer)
    - output_activity.log (OUTPUT layer)
    - full_activity.log (all activities combined)

    Args:
        log_dir: Directory for log files, or None for console only
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to also output to stderr

    Example:
        setup_ipo_logging(
            log_dir=Path.home() / '.local/state/unifind/logs',
            log_level='INFO',
        )
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)

        formatter = logging.Formatter(
            '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Full activity log (everything)
        full_handler = logging.FileHandler(log_dir / 'full_activity.log', encoding='utf-8')
        full_handler.setLevel(logging.DEBUG)
        full_handler.setFormatter(formatter)
        root_logger.addHandler(full_handler)

        for layer in LOG_LAYERS:
            handler = logging.FileHandler(
                log_dir / f'{layer}_activity.log', encoding='utf-8'
            )
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(formatter)
            handler.addFilter(IPOFilter(layer))
            root_logger.addHandler(handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(
            logging.Formatter('[%(levelname)s] %(name)s - %(message)s')
        )
        root_logger.addHandler(console_handler)


def get_input_logger(name: str) -> logging.Logger:
    """
    Get logger for INPUT layer.

    Args:
        name: Logger name (e.g., 'document_provider', 'main')

    Returns:
        Logger configured for INPUT layer
    """
    return logging.getLogger(f'input.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """
    Get logger for PROCESS layer.

    Args:
        name: Logger name (e.g., 'names_list_parser')

    Returns:
        Logger configured for PROCESS layer
    """
    return logging.getLogger(f'process.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """Get logger for OUTPUT layer."""
    return logging.getLogger(f'output.{name}')


__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
