"""
Dependency Declarations
=======================

Holds, for every component that has declared dependencies, the set of
components it depends on. Pure data: insertion and lookup only.

Declarations accumulate: a later DEPEND for the same component adds to the
existing set and never replaces it. Entries are never deleted.
"""

from typing import Dict, FrozenSet, Iterable, Iterator, List


class DeclarationStore:
    """
    Mapping of component -> declared direct dependencies.

    Each dependency set is kept as a dict used as an ordered set, so iteration
    follows first declaration order. Order carries no meaning beyond making
    cascade output deterministic.
    """

    def __init__(self) -> None:
        self._dependencies: Dict[str, Dict[str, None]] = {}

    def declare(self, component: str, dependencies: Iterable[str]) -> None:
        """
        Record that ``component`` requires each of ``dependencies``.

        Self-dependencies and components never seen before are accepted.
        Declaring the same dependency twice is a no-op.
        """
        declared = self._dependencies.setdefault(component, {})
        for dependency in dependencies:
            declared[dependency] = None

    def dependencies_of(self, component: str) -> FrozenSet[str]:
        """Return the declared dependencies, or an empty set."""
        return frozenset(self._dependencies.get(component, ()))

    def iter_dependencies(self, component: str) -> Iterator[str]:
        """Iterate declared dependencies in first declaration order."""
        return iter(list(self._dependencies.get(component, ())))

    def components(self) -> List[str]:
        """Components with at least one DEPEND declaration."""
        return list(self._dependencies)

    def __contains__(self, component: object) -> bool:
        return component in self._dependencies

    def __len__(self) -> int:
        return len(self._dependencies)

    def __repr__(self) -> str:
        return f"DeclarationStore(components={len(self)})"
