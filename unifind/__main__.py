# Path: unifind/__main__.py
"""Allows `python -m unifind`."""

import sys

from .main import main

sys.exit(main())
