# Path: tests/unit/test_config_loader.py
"""
Unit Tests for ConfigLoader

Tests configuration loading and validation:
- Singleton behavior
- Defaults with an empty environment
- Environment overrides and type conversion
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from unifind.config_loader import (
    ConfigLoader,
    DEFAULT_HTTP_MAX_RETRIES,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_USER_AGENT,
)
from unifind.constants import UNICODE_NAMES_LIST_URL


pytestmark = pytest.mark.usefixtures('reset_singletons')


class TestConfigLoaderSingleton:
    """Test singleton pattern."""

    def test_same_instance(self, clean_env):
        assert ConfigLoader() is ConfigLoader()

    def test_loaded_once(self, clean_env):
        config = ConfigLoader()

        with patch.dict(os.environ, {'UNIFIND_HTTP_TIMEOUT': '99'}):
            assert ConfigLoader().get('http_timeout') == config.get('http_timeout')


class TestConfigLoaderDefaults:
    """Test defaults with no UNIFIND_* variables set."""

    def test_defaults(self, clean_env):
        config = ConfigLoader()

        assert config.get('debug') is False
        assert config.get('names_list_url') == UNICODE_NAMES_LIST_URL
        assert config.get('cache_dir') is None
        assert config.get('http_timeout') == DEFAULT_HTTP_TIMEOUT
        assert config.get('http_max_retries') == DEFAULT_HTTP_MAX_RETRIES
        assert config.get('user_agent') == DEFAULT_USER_AGENT
        assert config.get('log_level') == DEFAULT_LOG_LEVEL
        assert config.get('log_dir') is None
        assert config.get('log_console') is True

    def test_user_agent_names_tool(self):
        assert DEFAULT_USER_AGENT.startswith('unifind/')

    def test_get_default_for_missing(self, clean_env):
        config = ConfigLoader()

        assert config.get('nonexistent') is None
        assert config.get('nonexistent', 'fallback') == 'fallback'
        assert config.get('cache_dir', 'fallback') == 'fallback'


class TestConfigLoaderOverrides:
    """Test environment overrides."""

    def test_typed_values(self, mock_env_vars, temp_dir):
        config = ConfigLoader()

        assert config.get('cache_dir') == temp_dir / 'cache'
        assert isinstance(config.get('cache_dir'), Path)
        assert config.get('http_timeout') == 5
        assert config.get('http_max_retries') == 2
        assert config.get('http_backoff_min') == 0.0
        assert config.get('log_level') == 'INFO'

    @pytest.mark.parametrize('raw,expected', [
        ('true', True), ('1', True), ('YES', True), ('on', True),
        ('false', False), ('0', False), ('nope', False),
    ])
    def test_bool_parsing(self, clean_env, raw, expected):
        with patch.dict(os.environ, {'UNIFIND_DEBUG': raw}):
            assert ConfigLoader().get('debug') is expected

    def test_invalid_int_falls_back(self, clean_env):
        with patch.dict(os.environ, {'UNIFIND_HTTP_TIMEOUT': 'soon'}):
            assert ConfigLoader().get('http_timeout') == DEFAULT_HTTP_TIMEOUT

    def test_invalid_float_falls_back(self, clean_env):
        with patch.dict(os.environ, {'UNIFIND_HTTP_BACKOFF_MAX': 'x'}):
            assert ConfigLoader().get('http_backoff_max') == 10.0

    def test_path_expands_variables(self, clean_env, temp_dir):
        env = {'UNIFIND_TEST_BASE': str(temp_dir), 'UNIFIND_LOG_DIR': '$UNIFIND_TEST_BASE/logs'}
        with patch.dict(os.environ, env):
            assert ConfigLoader().get('log_dir') == temp_dir / 'logs'

    def test_empty_path_is_none(self, clean_env):
        with patch.dict(os.environ, {'UNIFIND_CACHE_DIR': ''}):
            assert ConfigLoader().get('cache_dir') is None

    def test_required_path_missing(self, clean_env):
        config = ConfigLoader()

        with pytest.raises(ValueError, match='UNIFIND_MISSING'):
            config._get_path('UNIFIND_MISSING', required=True)

    def test_repr(self, clean_env):
        assert 'names_list_url=' in repr(ConfigLoader())
