# Path: unifind/core/__init__.py
"""
unifind Core Package

Core utilities.

Submodules:
    - logger: IPO-aware logging system
    - data_paths: Cache directory management
"""

from .data_paths import DataPathsManager

__all__ = [
    'DataPathsManager',
]
