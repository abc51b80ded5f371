"""
depgraph Core
=============

Dependency resolution engine:
- DeclarationStore: which components depend on which others
- InstallationTracker: installed components with reference counts,
  cascading install/remove
- CommandInterpreter: DEPEND/INSTALL/REMOVE/LIST script surface
- Declaration manifests loaded from YAML

Usage:
    from depgraph_core import InstallationTracker

    tracker = InstallationTracker()
    tracker.declare("TELNET", ["TCPIP", "NETCARD"])
    tracker.install("TELNET")
    tracker.list()  # ['TELNET', 'TCPIP', 'NETCARD']
"""

from .declarations import DeclarationStore
from .events import Event, EventKind
from .interpreter import Command, CommandInterpreter, CommandResult, parse_line, parse_lines
from .manifest import DeclarationManifest, load_manifest, load_manifest_string
from .tracker import InstallationTracker, TrackerSettings

__version__ = "0.1.0"

__all__ = [
    # Engine
    "DeclarationStore",
    "InstallationTracker",
    "TrackerSettings",
    "Event",
    "EventKind",
    # Interpreter
    "Command",
    "CommandInterpreter",
    "CommandResult",
    "parse_line",
    "parse_lines",
    # Manifests
    "DeclarationManifest",
    "load_manifest",
    "load_manifest_string",
]
