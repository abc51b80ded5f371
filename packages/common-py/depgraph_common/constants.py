"""
depgraph Shared Constants

Single source of truth for command keywords, exit codes, environment
variable names and defaults used across depgraph packages.

Usage:
    from depgraph_common.constants import Commands, ExitCodes

    if keyword == Commands.INSTALL:
        ...
"""

# =============================================================================
# VERSION INFORMATION
# =============================================================================

DEPGRAPH_VERSION = "0.1.0"
"""Current depgraph release"""

MANIFEST_VERSIONS = ["1"]
"""Supported declaration manifest versions"""

LOG_LEVELS = ["debug", "info", "warn", "warning", "error"]
"""Valid log levels"""

LOG_FORMATS = ["text", "json"]
"""Valid log output formats"""


# =============================================================================
# NAMESPACED CLASSES
# =============================================================================


class VersionInfo:
    """Version information."""

    DEPGRAPH = DEPGRAPH_VERSION
    MANIFEST = MANIFEST_VERSIONS


class Commands:
    """Keywords accepted by the command interpreter (matched exactly)."""

    DEPEND = "DEPEND"
    INSTALL = "INSTALL"
    REMOVE = "REMOVE"
    LIST = "LIST"
    END = "END"

    ALL = [DEPEND, INSTALL, REMOVE, LIST, END]


class ExitCodes:
    """Process exit codes used by the CLI."""

    OK = 0
    USAGE = 1  # Bad invocation or unexpected failure
    INVALID_INPUT = 2  # Unreadable script or invalid manifest
    COMMAND_FAILED = 3  # Unknown keyword, bad syntax, detected cycle, chain too deep


class EnvVars:
    """Environment variable names read by Settings."""

    PREFIX = "DEPGRAPH_"
    LOG_LEVEL = "DEPGRAPH_LOG_LEVEL"
    LOG_FORMAT = "DEPGRAPH_LOG_FORMAT"
    DETECT_CYCLES = "DEPGRAPH_DETECT_CYCLES"
    ECHO_COMMANDS = "DEPGRAPH_ECHO_COMMANDS"


class Defaults:
    """Default configuration values."""

    LOG_LEVEL = "warning"
    LOG_FORMAT = "text"
    DETECT_CYCLES = False
    ECHO_COMMANDS = True
    STDIN_PATH = "-"
