"""Boundary errors: the closed set of diagnostics produced by validation.

Each error is an immutable value carrying the data a reporter needs.
Errors are data, not exceptions: validation never raises on a violation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from archbound.domain.model.call import Call
from archbound.domain.model.enums import ErrorKind
from archbound.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class InvalidConfig:
    """Boundary declaration inconsistent with the boundary hierarchy."""

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_CONFIG

    boundary: str
    reason: str
    location: Location

    @property
    def message(self) -> str:
        return f"invalid boundary {self.boundary}: {self.reason}"


@dataclass(frozen=True, slots=True)
class InvalidIgnores:
    """Checks disabled on a boundary that is not top-level."""

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_IGNORES

    boundary: str
    location: Location

    @property
    def message(self) -> str:
        return f"can't disable checks in sub-boundary {self.boundary}"


@dataclass(frozen=True, slots=True)
class AncestorWithIgnoredChecks:
    """Boundary nested under an ancestor whose checks are disabled."""

    kind: ClassVar[ErrorKind] = ErrorKind.ANCESTOR_WITH_IGNORED_CHECKS

    boundary: str
    ancestor: str
    location: Location

    @property
    def message(self) -> str:
        return f"sub-boundary {self.boundary} inside boundary {self.ancestor} with disabled checks"


@dataclass(frozen=True, slots=True)
class UnknownDependency:
    """Dependency on an undeclared boundary."""

    kind: ClassVar[ErrorKind] = ErrorKind.UNKNOWN_DEPENDENCY

    name: str
    location: Location

    @property
    def message(self) -> str:
        return f"unknown boundary {self.name} is listed as a dependency"


@dataclass(frozen=True, slots=True)
class CheckInDisabledDependency:
    """Dependency on a boundary whose incoming checks are disabled."""

    kind: ClassVar[ErrorKind] = ErrorKind.CHECK_IN_DISABLED_DEPENDENCY

    name: str
    location: Location

    @property
    def message(self) -> str:
        return f"boundary {self.name} can't be a dependency because it has check_in disabled"


@dataclass(frozen=True, slots=True)
class ForbiddenDependency:
    """Dependency not allowed by the parent/sibling/inherited rules."""

    kind: ClassVar[ErrorKind] = ErrorKind.FORBIDDEN_DEPENDENCY

    name: str
    location: Location

    @property
    def message(self) -> str:
        return f"forbidden dependency to {self.name}"


@dataclass(frozen=True, slots=True)
class UnknownExport:
    """Exported module belongs to no known app."""

    kind: ClassVar[ErrorKind] = ErrorKind.UNKNOWN_EXPORT

    module: str
    location: Location

    @property
    def message(self) -> str:
        return f"unknown module {self.module} is listed as an export"


@dataclass(frozen=True, slots=True)
class ExportNotInBoundary:
    """Exported module is owned by another boundary."""

    kind: ClassVar[ErrorKind] = ErrorKind.EXPORT_NOT_IN_BOUNDARY

    module: str
    boundary: str
    location: Location

    @property
    def message(self) -> str:
        return f"module {self.module} can't be exported because it's not a part of {self.boundary}"


@dataclass(frozen=True, slots=True)
class Cycle:
    """Boundaries whose dependency edges form a closed loop.

    Attributes:
        boundaries: Cycle vertices in traversal order. A self-dependency is
            (name, name).
    """

    kind: ClassVar[ErrorKind] = ErrorKind.CYCLE

    boundaries: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(self.boundaries) < 2:
            raise ValueError(f"cycle needs at least 2 boundaries, got {len(self.boundaries)}")

    @property
    def location(self) -> None:
        return None

    @property
    def vertex_set(self) -> frozenset[str]:
        """Cycle identity: rotations and reversals share it."""
        return frozenset(self.boundaries)

    @property
    def message(self) -> str:
        closed = self.boundaries[0] == self.boundaries[-1]
        path = " -> ".join(self.boundaries if closed else (*self.boundaries, self.boundaries[0]))
        return f"dependency cycle found: {path}"


@dataclass(frozen=True, slots=True)
class UnclassifiedModule:
    """Module owned by no declared boundary."""

    kind: ClassVar[ErrorKind] = ErrorKind.UNCLASSIFIED_MODULE

    module: str

    @property
    def location(self) -> None:
        return None

    @property
    def message(self) -> str:
        return f"{self.module} is not included in any boundary"


@dataclass(frozen=True, slots=True)
class _CallError:
    """Common payload of call errors.

    Attributes:
        call: Offending call
        from_boundary: Caller boundary name
        to_boundary: Resolved target boundary name (None if unresolved)
    """

    call: Call
    from_boundary: str
    to_boundary: str | None = None

    @property
    def location(self) -> Location:
        return self.call.location


@dataclass(frozen=True, slots=True)
class InvalidExternalDependencyCall(_CallError):
    """Call into a strictly checked external app that resolves to no boundary."""

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_EXTERNAL_DEPENDENCY_CALL

    @property
    def message(self) -> str:
        return (
            f"{self.call.callee} can't be called from {self.from_boundary}: "
            f"{self.call.callee_module} is not in any boundary of a checked app"
        )


@dataclass(frozen=True, slots=True)
class ForbiddenCall(_CallError):
    """Cross-boundary call with no authorizing dependency."""

    kind: ClassVar[ErrorKind] = ErrorKind.FORBIDDEN_CALL

    @property
    def message(self) -> str:
        return f"forbidden reference to {self.call.callee} ({self.from_boundary} -> {self.to_boundary})"


@dataclass(frozen=True, slots=True)
class RuntimeDependencyMismatch(_CallError):
    """Runtime call authorized only by a compile-time dependency."""

    kind: ClassVar[ErrorKind] = ErrorKind.RUNTIME_DEPENDENCY_MISMATCH

    @property
    def message(self) -> str:
        return (
            f"runtime reference to {self.call.callee} from {self.from_boundary}, "
            f"but {self.to_boundary} is a compile-time dependency"
        )


@dataclass(frozen=True, slots=True)
class NotExported(_CallError):
    """Call to a module the target boundary does not export."""

    kind: ClassVar[ErrorKind] = ErrorKind.NOT_EXPORTED

    @property
    def message(self) -> str:
        return f"{self.call.callee_module} is not exported by its owner boundary {self.to_boundary}"


type CallError = (
    InvalidExternalDependencyCall | ForbiddenCall | RuntimeDependencyMismatch | NotExported
)

type BoundaryError = (
    InvalidConfig
    | InvalidIgnores
    | AncestorWithIgnoredChecks
    | UnknownDependency
    | CheckInDisabledDependency
    | ForbiddenDependency
    | UnknownExport
    | ExportNotInBoundary
    | Cycle
    | UnclassifiedModule
    | CallError
)
