"""Read-only snapshot of all boundaries and module classification.

Boundaries live in a flat name-keyed mapping with precomputed parent links.
Every relationship query (parent, ancestors, siblings) is a lookup against
that mapping, never a reference held by a Boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from archbound.domain.exceptions import ViewConstructionError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from archbound.domain.model.boundary import Boundary
    from archbound.domain.model.call import Callee
    from archbound.domain.model.module import ModuleInfo


@dataclass(frozen=True, slots=True)
class BoundaryView:
    """Immutable boundary view, built once per validation run.

    Attributes:
        app: App under check
        boundaries: Boundary name → Boundary, sorted by name
        modules: Module name → ModuleInfo
        parents: Boundary name → declared parent name (None for top-level)
        unclassified: Modules of the app under check owned by no boundary
    """

    app: str
    boundaries: Mapping[str, Boundary]
    modules: Mapping[str, ModuleInfo]
    parents: Mapping[str, str | None]
    unclassified: tuple[ModuleInfo, ...]

    @classmethod
    def build(
        cls,
        app: str,
        boundaries: Iterable[Boundary],
        modules: Iterable[ModuleInfo],
        unclassified: Iterable[str] | None = None,
    ) -> BoundaryView:
        """Build view from provider data.

        Args:
            app: App under check
            boundaries: All declared boundaries (any app)
            modules: Classification of every known module
            unclassified: Unclassified module names. None = derive from modules.

        Returns:
            BoundaryView

        Raises:
            ViewConstructionError: Duplicate boundary or module names, a module
                classified into an undeclared boundary, or an unclassified name
                that is unknown or classified.
        """
        if not app:
            raise ViewConstructionError("app must not be empty")

        by_name: dict[str, Boundary] = {}
        for boundary in boundaries:
            if boundary.name in by_name:
                raise ViewConstructionError(f"duplicate boundary {boundary.name!r}")
            by_name[boundary.name] = boundary

        module_map: dict[str, ModuleInfo] = {}
        for module in modules:
            if module.name in module_map:
                raise ViewConstructionError(f"duplicate module {module.name!r}")
            if module.boundary is not None and module.boundary not in by_name:
                raise ViewConstructionError(
                    f"module {module.name!r} classified into undeclared boundary {module.boundary!r}"
                )
            module_map[module.name] = module

        if unclassified is None:
            loose = tuple(
                module
                for name, module in sorted(module_map.items())
                if module.boundary is None and module.app == app
            )
        else:
            loose_list: list[ModuleInfo] = []
            for name in unclassified:
                module = module_map.get(name)
                if module is None:
                    raise ViewConstructionError(f"unclassified module {name!r} is unknown")
                if module.boundary is not None:
                    raise ViewConstructionError(
                        f"unclassified module {name!r} is owned by {module.boundary!r}"
                    )
                loose_list.append(module)
            loose = tuple(loose_list)

        ordered = dict(sorted(by_name.items()))
        parents = {
            name: boundary.parent_name if boundary.parent_name in ordered else None
            for name, boundary in ordered.items()
        }

        return cls(
            app=app,
            boundaries=MappingProxyType(ordered),
            modules=MappingProxyType(module_map),
            parents=MappingProxyType(parents),
            unclassified=loose,
        )

    # -------------------------------------------------------------------------
    # Boundaries
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[Boundary]:
        """Iterate boundaries in name order."""
        return iter(self.boundaries.values())

    def __len__(self) -> int:
        return len(self.boundaries)

    def has_boundary(self, name: str) -> bool:
        """Check if boundary is declared. O(1)."""
        return name in self.boundaries

    def get(self, name: str) -> Boundary | None:
        """Get boundary by name. O(1)."""
        return self.boundaries.get(name)

    def boundaries_of_app(self, app: str) -> tuple[Boundary, ...]:
        """Get boundaries owned by an app, in name order."""
        return tuple(b for b in self.boundaries.values() if b.app == app)

    def parent_of(self, boundary: Boundary) -> Boundary | None:
        """Get nearest declared enclosing boundary. O(1)."""
        parent_name = self.parents.get(boundary.name)
        return self.boundaries[parent_name] if parent_name is not None else None

    def ancestors_of(self, boundary: Boundary) -> tuple[Boundary, ...]:
        """Get declared ancestors, nearest first."""
        return tuple(self.boundaries[a] for a in boundary.ancestors if a in self.boundaries)

    def siblings(self, a: Boundary, b: Boundary) -> bool:
        """Check if both boundaries share the same non-null parent."""
        parent_a = self.parents.get(a.name)
        return parent_a is not None and parent_a == self.parents.get(b.name)

    def policy_chain(self, boundary: Boundary) -> tuple[Boundary, ...]:
        """Get boundary plus ancestors whose policy it inherits.

        The ancestor scan stops at (and includes) the first STRICT ancestor.
        A STRICT boundary inherits nothing.
        """
        if boundary.is_strict:
            return (boundary,)

        chain = [boundary]
        for ancestor in self.ancestors_of(boundary):
            chain.append(ancestor)
            if ancestor.is_strict:
                break
        return tuple(chain)

    def expected_ancestors(self, name: str) -> tuple[str, ...]:
        """Get declared dot-path prefixes of a name, nearest first.

        Example:
            "a.b.c" with "a" and "a.b" declared → ("a.b", "a")
        """
        parts = name.split(".")
        prefixes = (".".join(parts[:i]) for i in range(len(parts) - 1, 0, -1))
        return tuple(prefix for prefix in prefixes if prefix in self.boundaries)

    def dependency_edges(self) -> tuple[tuple[str, str], ...]:
        """Get (from, to) edges between declared boundaries, edge kind dropped."""
        edges: dict[tuple[str, str], None] = {}
        for boundary in self.boundaries.values():
            for dep in boundary.dependencies:
                if dep.name in self.boundaries:
                    edges[(boundary.name, dep.name)] = None
        return tuple(edges)

    # -------------------------------------------------------------------------
    # Modules
    # -------------------------------------------------------------------------

    def module(self, name: str) -> ModuleInfo | None:
        """Get module classification. O(1)."""
        return self.modules.get(name)

    def app_of(self, module: str) -> str | None:
        """Get owning app of a module (None if unknown)."""
        info = self.modules.get(module)
        return info.app if info is not None else None

    def boundary_for(self, module: str) -> Boundary | None:
        """Get owning boundary of a module (None if unclassified or unknown)."""
        info = self.modules.get(module)
        if info is None or info.boundary is None:
            return None
        return self.boundaries[info.boundary]

    def is_macro(self, callee: Callee) -> bool:
        """Check if callee is a macro exported by its module."""
        info = self.modules.get(callee.module)
        return info is not None and info.exports_macro(callee.function, callee.arity)

    def unclassified_modules(self) -> tuple[ModuleInfo, ...]:
        """Get modules of the app under check owned by no boundary."""
        return self.unclassified
