"""
Installation Tracker
====================

Tracks which components are installed and how many installed components
depend on each of them.

Install and remove cascade along declared dependencies:

1. install(X) creates X with reference count 0, then installs every missing
   dependency as a cascade and bumps the count of every dependency that is
   already installed.
2. remove(X) deletes X only when nothing still needs it (direct request with
   count 0, or cascade with count <= 1). Otherwise it decrements the count and
   stops. A deletion cascades remove() into every declared dependency.

Reference counts are maintained incrementally and never recomputed from the
graph, so they are only as accurate as the sequence of calls that produced
them. In particular a dependency installed by a cascade starts at 0, not 1.

This class is not thread safe. Callers that share a tracker across threads
must serialize every call externally.

Cycles: entries are created before the install cascade and deleted before
the remove cascade, so a cyclic declaration set terminates (the revisited
component is treated as already installed, or as not installed). Very deep
dependency chains recurse once per level and can exceed the interpreter
recursion limit, raising RecursionError. The error propagates mid-cascade and
is not rolled back: components installed (or removed) before the limit was
hit stay that way, and their reference counts reflect the partial cascade.
Set ``detect_cycles`` to reject any call whose reachable declarations
contain a cycle before state changes.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional

from depgraph_common.errors import DependencyCycleError, NotInstalledError
from depgraph_common.logger import get_logger

from .declarations import DeclarationStore
from .events import Event, EventKind

logger = get_logger(__name__)


@dataclass
class TrackerSettings:
    """
    Engine options.

    Attributes:
        detect_cycles: Reject install/remove calls that can reach a dependency cycle
    """

    detect_cycles: bool = False


class InstallationTracker:
    """
    Installed components and their reference counts.

    Owns (or is given) a DeclarationStore describing the dependency topology.
    The store is only read here; declare() is a convenience pass-through.
    """

    def __init__(
        self,
        declarations: Optional[DeclarationStore] = None,
        settings: Optional[TrackerSettings] = None,
    ):
        self.declarations = declarations if declarations is not None else DeclarationStore()
        self.settings = settings or TrackerSettings()
        self._installed: Dict[str, int] = {}

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def declare(self, component: str, dependencies: Iterable[str]) -> None:
        """Declare dependencies for ``component`` (adds to earlier declarations)."""
        dependencies = list(dependencies)
        self.declarations.declare(component, dependencies)
        logger.debug("Declared dependencies", component=component, dependencies=dependencies)

    def dependencies_of(self, component: str) -> FrozenSet[str]:
        return self.declarations.dependencies_of(component)

    # ------------------------------------------------------------------
    # Install / remove
    # ------------------------------------------------------------------

    def install(self, component: str, is_dependency: bool = False) -> List[Event]:
        """
        Install ``component`` and every missing transitive dependency.

        Args:
            component: Component name
            is_dependency: True when called as part of a cascade

        Returns:
            Events in the order they happened, cascade included

        Raises:
            DependencyCycleError: detect_cycles is on and a cycle is reachable
            RecursionError: The dependency chain is deeper than the recursion limit
        """
        if self.settings.detect_cycles:
            self._check_acyclic(component)
        events: List[Event] = []
        self._install(component, is_dependency, events)
        return events

    def remove(self, component: str, is_dependency: bool = False) -> List[Event]:
        """
        Remove ``component`` unless other installed components still need it.

        Args:
            component: Component name
            is_dependency: True when called as part of a cascade

        Returns:
            Events in the order they happened, cascade included

        Raises:
            DependencyCycleError: detect_cycles is on and a cycle is reachable
            RecursionError: The dependency chain is deeper than the recursion limit
        """
        if self.settings.detect_cycles:
            self._check_acyclic(component)
        events: List[Event] = []
        self._remove(component, is_dependency, events)
        return events

    def _install(self, component: str, is_dependency: bool, events: List[Event]) -> None:
        if component in self._installed:
            # Cascades never land here: the parent bumps the count instead.
            if not is_dependency:
                self._emit(events, EventKind.ALREADY_INSTALLED, component, is_dependency)
            return

        self._installed[component] = 0
        self._emit(events, EventKind.INSTALLED, component, is_dependency)

        for dependency in self.declarations.iter_dependencies(component):
            if dependency not in self._installed:
                self._install(dependency, True, events)
            else:
                self._installed[dependency] += 1
                self._emit(events, EventKind.REFERENCE_ADDED, dependency, True)

    def _remove(self, component: str, is_dependency: bool, events: List[Event]) -> None:
        count = self._installed.get(component)
        if count is None:
            self._emit(events, EventKind.NOT_INSTALLED, component, is_dependency)
            return

        if (is_dependency and count > 1) or (not is_dependency and count > 0):
            self._installed[component] = count - 1
            self._emit(events, EventKind.STILL_NEEDED, component, is_dependency)
            return

        del self._installed[component]
        self._emit(events, EventKind.REMOVED, component, is_dependency)

        for dependency in self.declarations.iter_dependencies(component):
            self._remove(dependency, True, events)

    def _emit(self, events: List[Event], kind: EventKind, component: str, is_dependency: bool) -> None:
        event = Event(
            kind=kind,
            component=component,
            is_dependency=is_dependency,
            reference_count=self._installed.get(component),
        )
        events.append(event)
        if kind == EventKind.REFERENCE_ADDED:
            logger.debug("Reference added", component=component, count=event.reference_count)
        else:
            logger.info(event.message, component=component, cascade=is_dependency)

    def _check_acyclic(self, component: str) -> None:
        """Walk declarations reachable from ``component``; raise on the first cycle."""
        on_path: Dict[str, None] = {}
        done = set()
        stack = [(component, self.declarations.iter_dependencies(component))]
        on_path[component] = None

        while stack:
            node, children = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
                del on_path[node]
                done.add(node)
                continue
            if child in on_path:
                path = list(on_path)
                cycle = path[path.index(child):] + [child]
                logger.error("Dependency cycle detected", cycle=" -> ".join(cycle))
                raise DependencyCycleError(cycle)
            if child not in done:
                on_path[child] = None
                stack.append((child, self.declarations.iter_dependencies(child)))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self) -> List[str]:
        """Installed components. Order is not significant."""
        return [component for component in self._installed]

    def is_installed(self, component: str) -> bool:
        return component in self._installed

    def reference_count(self, component: str) -> int:
        """
        Current reference count of an installed component.

        Raises:
            NotInstalledError: If the component is not installed
        """
        try:
            return self._installed[component]
        except KeyError:
            raise NotInstalledError(component) from None

    def snapshot(self) -> Dict[str, int]:
        """Copy of the installed component -> reference count mapping."""
        return dict(self._installed)

    def __contains__(self, component: object) -> bool:
        return component in self._installed

    def __len__(self) -> int:
        return len(self._installed)

    def __repr__(self) -> str:
        return f"InstallationTracker(installed={len(self)}, declared={len(self.declarations)})"
