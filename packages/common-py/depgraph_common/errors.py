"""
depgraph Error Classes

All depgraph packages raise subclasses of DepgraphError so callers can catch
a single base class. Informational engine outcomes (installed, removed,
still needed, ...) are reported as events, never raised.

Usage:
    from depgraph_common.errors import UnknownCommandError

    raise UnknownCommandError("FROB")
"""

from typing import Any, Dict, List, Optional


class DepgraphError(Exception):
    """
    Base class for every depgraph error.

    Attributes:
        message: Human-readable description
        code: Stable machine-readable error code
    """

    code = "DEPGRAPH_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for structured output."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
        }


class ValidationError(DepgraphError):
    """Raised when input fails validation."""

    code = "VALIDATION_ERROR"


class NotFoundError(DepgraphError):
    """Raised when a requested resource (file, component) does not exist."""

    code = "NOT_FOUND"


class NotInstalledError(NotFoundError):
    """Raised by queries that require a component to be installed."""

    code = "NOT_INSTALLED"

    def __init__(self, component: str):
        self.component = component
        super().__init__(f"{component} is not installed")


class CommandError(DepgraphError):
    """Base class for errors raised while interpreting a command line."""

    code = "COMMAND_ERROR"

    def __init__(self, message: str, line: Optional[str] = None, line_number: Optional[int] = None):
        self.line = line
        self.line_number = line_number
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["line"] = self.line
        data["line_number"] = self.line_number
        return data


class UnknownCommandError(CommandError):
    """Raised for a line whose leading token is not a known command."""

    code = "UNKNOWN_COMMAND"

    def __init__(self, command: str, line: Optional[str] = None, line_number: Optional[int] = None):
        self.command = command
        super().__init__(f"Unrecognized command: {command}", line=line, line_number=line_number)


class CommandSyntaxError(CommandError):
    """Raised when a known command is missing required arguments."""

    code = "COMMAND_SYNTAX"


class ManifestError(ValidationError):
    """Raised when a declaration manifest cannot be loaded."""

    code = "MANIFEST_ERROR"


class DependencyCycleError(DepgraphError):
    """
    Raised when cycle detection is enabled and a dependency cycle is reached.

    Attributes:
        cycle: Components forming the cycle, first component repeated at the end
    """

    code = "DEPENDENCY_CYCLE"

    def __init__(self, cycle: List[str]):
        self.cycle = list(cycle)
        super().__init__("Dependency cycle detected: " + " -> ".join(self.cycle))

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["cycle"] = self.cycle
        return data
