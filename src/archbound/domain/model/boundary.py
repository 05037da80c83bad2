"""Boundary entity and its declaration value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from archbound.domain.model.enums import BoundaryKind, DependencyKind
from archbound.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class Dependency:
    """Declared permission to call into another boundary.

    Attributes:
        name: Target boundary name
        kind: COMPILE or RUNTIME edge
    """

    name: str
    kind: DependencyKind = DependencyKind.RUNTIME

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("dependency name must not be empty")

    def authorizes(self, mode: DependencyKind, *, macro: bool = False) -> bool:
        """Check if this edge authorizes a call of the given mode.

        A RUNTIME edge authorizes calls of either mode. A COMPILE edge
        authorizes compile-time calls and runtime calls to macros.
        """
        if self.kind is DependencyKind.RUNTIME:
            return True
        return mode is DependencyKind.COMPILE or macro


@dataclass(frozen=True, slots=True)
class ExternalAppCheck:
    """External app whose calls of the given mode are strictly checked."""

    app: str
    mode: DependencyKind

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.app:
            raise ValueError("app must not be empty")


@dataclass(frozen=True, slots=True)
class ExactExport:
    """Export rule naming a single module."""

    module: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.module:
            raise ValueError("module must not be empty")


@dataclass(frozen=True, slots=True)
class SubtreeExport:
    """Export rule: every module under root except the listed ones.

    Attributes:
        root: Root module of the exported subtree
        except_: Modules under root that stay private
    """

    root: str
    except_: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.root:
            raise ValueError("root must not be empty")
        if any(not module for module in self.except_):
            raise ValueError("except_ must not contain empty module names")
        for module in self.except_:
            if not module.startswith(self.root + "."):
                raise ValueError(f"except_ module {module!r} is not under root {self.root!r}")


type ExportRule = ExactExport | SubtreeExport


@dataclass(frozen=True, slots=True)
class Boundary:
    """Named architectural unit owning a set of modules.

    Immutable. Relationships to other boundaries (parent, siblings) are
    resolved by BoundaryView, never stored as object references.

    Attributes:
        name: Unique dot-separated hierarchical name
        app: Owning app
        location: Declaration site (diagnostics only)
        kind: STRICT or RELAXED
        check_in: False = calls into this boundary are never checked
        check_out: False = calls out of this boundary are never checked
        checked_external_apps: External (app, mode) pairs under strict checking
        ancestors: Enclosing boundary names, nearest first
        dependencies: Declared dependency edges, in declaration order
        exports: Export rules
        implicit: True = every owned module is exported
    """

    name: str
    app: str
    location: Location = field(default_factory=lambda: Location(file=Path("."), line=1))
    kind: BoundaryKind = BoundaryKind.RELAXED
    check_in: bool = True
    check_out: bool = True
    checked_external_apps: frozenset[ExternalAppCheck] = frozenset()
    ancestors: tuple[str, ...] = ()
    dependencies: tuple[Dependency, ...] = ()
    exports: tuple[ExportRule, ...] = ()
    implicit: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if any(not segment for segment in self.name.split(".")):
            raise ValueError(f"name must not contain empty segments: {self.name!r}")
        if not self.app:
            raise ValueError("app must not be empty")
        if self.name in self.ancestors:
            raise ValueError(f"boundary {self.name!r} cannot be its own ancestor")
        if len(set(self.ancestors)) != len(self.ancestors):
            raise ValueError(f"ancestors of {self.name!r} contain duplicates")

    @property
    def parent_name(self) -> str | None:
        """Name of the nearest enclosing boundary (None for top-level)."""
        return self.ancestors[0] if self.ancestors else None

    @property
    def is_strict(self) -> bool:
        """Check if boundary is STRICT."""
        return self.kind is BoundaryKind.STRICT

    @property
    def ignores_checks(self) -> bool:
        """Check if incoming or outgoing checks are disabled."""
        return not self.check_in or not self.check_out

    def dependencies_on(self, name: str) -> tuple[Dependency, ...]:
        """Get declared edges targeting the named boundary."""
        return tuple(dep for dep in self.dependencies if dep.name == name)

    def depends_on(self, name: str, kind: DependencyKind) -> bool:
        """Check if an edge (name, kind) is declared."""
        return Dependency(name, kind) in self.dependencies

    def checks_external(self, app: str, mode: DependencyKind) -> bool:
        """Check if the (app, mode) pair is listed for strict external checking."""
        return ExternalAppCheck(app, mode) in self.checked_external_apps
