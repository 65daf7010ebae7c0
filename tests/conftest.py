# Path: tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for unifind

Provides common test fixtures used across all test modules.
"""

import logging
import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tests.fixtures.sample_data import SAMPLE_NAMES_LIST


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env():
    """Environment without any UNIFIND_* variables."""
    with patch.dict(os.environ):
        for key in [k for k in os.environ if k.startswith('UNIFIND_')]:
            del os.environ[key]
        yield


@pytest.fixture
def mock_env_vars(clean_env, temp_dir):
    """Provide mock environment variables for testing."""
    env_vars = {
        'UNIFIND_DEBUG': 'false',
        'UNIFIND_CACHE_DIR': str(temp_dir / 'cache'),
        'UNIFIND_HTTP_TIMEOUT': '5',
        'UNIFIND_HTTP_MAX_RETRIES': '2',
        'UNIFIND_HTTP_BACKOFF_MIN': '0',
        'UNIFIND_HTTP_BACKOFF_MAX': '0',
        'UNIFIND_LOG_LEVEL': 'INFO',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def reset_singletons():
    """Reset any singleton instances between tests."""
    from unifind.config_loader import ConfigLoader
    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False


# ==============================================================================
# MOCK FIXTURES
# ==============================================================================

def _mock_config(values: dict) -> MagicMock:
    config = MagicMock()
    config.get.side_effect = lambda key, default=None: (
        values[key] if values.get(key) is not None else default
    )
    return config


@pytest.fixture
def mock_config(temp_dir):
    """Create a mock ConfigLoader for testing."""
    return _mock_config({
        'debug': False,
        'names_list_url': 'https://example.org/ucd/NamesList.txt',
        'cache_dir': temp_dir / 'cache',
        'http_timeout': 5,
        'http_max_retries': 3,
        'http_backoff_min': 0,
        'http_backoff_max': 0,
        'user_agent': 'unifind-test',
        'log_level': 'INFO',
        'log_dir': None,
        'log_console': False,
    })


@pytest.fixture
def make_config():
    """Factory for mock configs with explicit values."""
    return _mock_config


# ==============================================================================
# DOCUMENT FIXTURES
# ==============================================================================

@pytest.fixture
def names_list_text():
    """Sample NamesList document text."""
    return SAMPLE_NAMES_LIST


@pytest.fixture
def cached_names_list(mock_config, names_list_text):
    """Write the sample document where the provider expects its cache copy."""
    cache_dir = mock_config.get('cache_dir') / 'unifind' / 'ucd'
    cache_dir.mkdir(parents=True)
    path = cache_dir / 'NamesList.txt'
    path.write_bytes(names_list_text.encode('utf-8'))
    return path


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture
def restore_root_logger():
    """Remove handlers installed by logging setup tests and restore the level."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level

    yield root_logger

    # pytest manages its own capture handlers; only drop the stdlib ones
    for handler in list(root_logger.handlers):
        if handler not in handlers and type(handler).__module__ == 'logging':
            handler.close()
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
