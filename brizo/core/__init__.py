"""Core modules for brizo."""

from brizo.core.client import API_BASE_URL, DEFAULT_TIMEOUT, ApiResponse, BrizoHttpClient
from brizo.core.config import CONFIG_DIR, CONFIG_FILE, Config, Profile
from brizo.core.exceptions import (
    BrizoError,
    ConfigurationError,
    ErrorKind,
    ProfileNotFoundError,
    classify,
)
from brizo.core.logging import LogContext, get_logger, log_context, setup_logging

__all__ = [
    # Exceptions
    "BrizoError",
    "ErrorKind",
    "classify",
    "ConfigurationError",
    "ProfileNotFoundError",
    # Config
    "Config",
    "Profile",
    "CONFIG_DIR",
    "CONFIG_FILE",
    # Client
    "API_BASE_URL",
    "DEFAULT_TIMEOUT",
    "ApiResponse",
    "BrizoHttpClient",
    # Logging
    "get_logger",
    "setup_logging",
    "LogContext",
    "log_context",
]
