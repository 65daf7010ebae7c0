# Path: unifind/core/logger/__init__.py
"""
unifind Logger Package

IPO-aware logging.

Provides separate log streams for:
- INPUT layer (configuration, document retrieval)
- PROCESS layer (parsing, matching)
- OUTPUT layer (result rendering)
"""

from .ipo_logging import (
    IPOFilter,
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
