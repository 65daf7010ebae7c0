# Path: unifind/config_loader.py
"""
Configuration Loader for unifind

Loads configuration from .env file and environment variables.
Singleton pattern ensures consistent configuration across all components.

Nothing is required: every key has a default so the tool runs with an
empty environment.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv

from . import __version__
from .constants import APP_NAME, UNICODE_NAMES_LIST_URL


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'WARNING'

# HTTP Defaults
DEFAULT_HTTP_TIMEOUT: int = 30
DEFAULT_HTTP_MAX_RETRIES: int = 3
DEFAULT_HTTP_BACKOFF_MIN: float = 2.0
DEFAULT_HTTP_BACKOFF_MAX: float = 10.0
DEFAULT_USER_AGENT: str = f'{APP_NAME}/{__version__}'


class ConfigLoader:
    """
    Singleton configuration loader for unifind.

    Loads configuration from environment variables with type
    conversion and sensible defaults.

    Example:
        config = ConfigLoader()
        url = config.get('names_list_url')
        timeout = config.get('http_timeout')  # Returns int
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads the .env file
        from the project root when one exists.
        """
        if ConfigLoader._initialized:
            return

        # unifind/config_loader.py -> .env is in the project root
        project_root = Path(__file__).resolve().parent.parent
        env_path = project_root / '.env'

        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # DEBUG
            # ================================================================
            'debug': self._get_bool('UNIFIND_DEBUG', False),

            # ================================================================
            # SOURCE DOCUMENT
            # ================================================================
            'names_list_url': self._get_env(
                'UNIFIND_NAMES_LIST_URL', UNICODE_NAMES_LIST_URL
            ),

            # ================================================================
            # CACHE CONFIGURATION
            # ================================================================
            # None -> platform user cache directory
            'cache_dir': self._get_path('UNIFIND_CACHE_DIR'),

            # ================================================================
            # HTTP CONFIGURATION
            # ================================================================
            'http_timeout': self._get_int('UNIFIND_HTTP_TIMEOUT', DEFAULT_HTTP_TIMEOUT),
            'http_max_retries': self._get_int(
                'UNIFIND_HTTP_MAX_RETRIES', DEFAULT_HTTP_MAX_RETRIES
            ),
            'http_backoff_min': self._get_float(
                'UNIFIND_HTTP_BACKOFF_MIN', DEFAULT_HTTP_BACKOFF_MIN
            ),
            'http_backoff_max': self._get_float(
                'UNIFIND_HTTP_BACKOFF_MAX', DEFAULT_HTTP_BACKOFF_MAX
            ),
            'user_agent': self._get_env('UNIFIND_USER_AGENT', DEFAULT_USER_AGENT),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_level': self._get_env('UNIFIND_LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_dir': self._get_path('UNIFIND_LOG_DIR'),
            'log_console': self._get_bool('UNIFIND_LOG_CONSOLE', True),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value = self._config.get(key)
        return default if value is None else value

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name
            required: If True, raise error when missing

        Returns:
            Path object or None

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(key)

        if not value:
            if required:
                raise ValueError(f"Required path not configured: {key}")
            return None

        # Handle variable interpolation
        if '$' in value:
            value = os.path.expandvars(value)

        return Path(value).expanduser()

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def _get_float(self, key: str, default: float) -> float:
        """Get float environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            return default

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def __repr__(self) -> str:
        """String representation showing key settings."""
        return (
            f"ConfigLoader("
            f"names_list_url={self._config.get('names_list_url')}, "
            f"cache_dir={self._config.get('cache_dir')})"
        )


__all__ = ['ConfigLoader']
