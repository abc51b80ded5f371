"""
depgraph Common Package

Shared utilities and primitives used across all depgraph packages.

This package provides:
- Exception classes for consistent error handling
- Constants for command keywords, exit codes and defaults (namespaced)
- Environment-driven settings
- Structured logging

Usage:
    from depgraph_common import DepgraphError, Commands, get_logger

    logger = get_logger(__name__)
    if keyword not in Commands.ALL:
        ...
"""

# Error classes
from .errors import (
    DepgraphError,
    ValidationError,
    NotFoundError,
    NotInstalledError,
    CommandError,
    UnknownCommandError,
    CommandSyntaxError,
    ManifestError,
    DependencyCycleError,
)

# Constants - Namespaced classes (recommended)
from .constants import (
    VersionInfo,
    Commands,
    ExitCodes,
    EnvVars,
    Defaults,
    # Convenience aliases
    DEPGRAPH_VERSION,
    MANIFEST_VERSIONS,
    LOG_LEVELS,
    LOG_FORMATS,
)

# Settings
from .config import Settings, get_settings

# Logger
from .logger import (
    DepgraphLogger,
    get_logger,
    configure_logging,
    set_session_id,
    get_session_id,
    clear_session_id,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "DepgraphError",
    "ValidationError",
    "NotFoundError",
    "NotInstalledError",
    "CommandError",
    "UnknownCommandError",
    "CommandSyntaxError",
    "ManifestError",
    "DependencyCycleError",
    # Namespaced constants (recommended)
    "VersionInfo",
    "Commands",
    "ExitCodes",
    "EnvVars",
    "Defaults",
    # Convenience aliases
    "DEPGRAPH_VERSION",
    "MANIFEST_VERSIONS",
    "LOG_LEVELS",
    "LOG_FORMATS",
    # Settings
    "Settings",
    "get_settings",
    # Logger
    "DepgraphLogger",
    "get_logger",
    "configure_logging",
    "set_session_id",
    "get_session_id",
    "clear_session_id",
]
