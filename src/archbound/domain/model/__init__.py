"""Domain model entities."""

from archbound.domain.model.boundary import (
    Boundary,
    Dependency,
    ExactExport,
    ExportRule,
    ExternalAppCheck,
    SubtreeExport,
)
from archbound.domain.model.call import Call, Callee
from archbound.domain.model.check_result import CheckResult
from archbound.domain.model.check_stats import CheckStats
from archbound.domain.model.configuration import CheckConfig
from archbound.domain.model.enums import BoundaryKind, DependencyKind, ErrorKind, ExportMatching
from archbound.domain.model.errors import (
    AncestorWithIgnoredChecks,
    BoundaryError,
    CallError,
    CheckInDisabledDependency,
    Cycle,
    ExportNotInBoundary,
    ForbiddenCall,
    ForbiddenDependency,
    InvalidConfig,
    InvalidExternalDependencyCall,
    InvalidIgnores,
    NotExported,
    RuntimeDependencyMismatch,
    UnclassifiedModule,
    UnknownDependency,
    UnknownExport,
)
from archbound.domain.model.location import Location
from archbound.domain.model.module import ModuleInfo

__all__ = [
    # Enums
    "BoundaryKind",
    "DependencyKind",
    "ErrorKind",
    "ExportMatching",
    # Value objects
    "Location",
    "Dependency",
    "ExternalAppCheck",
    "ExactExport",
    "SubtreeExport",
    "ExportRule",
    "Callee",
    # Entities
    "Boundary",
    "ModuleInfo",
    "Call",
    # Errors
    "BoundaryError",
    "CallError",
    "InvalidConfig",
    "InvalidIgnores",
    "AncestorWithIgnoredChecks",
    "UnknownDependency",
    "CheckInDisabledDependency",
    "ForbiddenDependency",
    "UnknownExport",
    "ExportNotInBoundary",
    "Cycle",
    "UnclassifiedModule",
    "InvalidExternalDependencyCall",
    "ForbiddenCall",
    "RuntimeDependencyMismatch",
    "NotExported",
    # Results
    "CheckConfig",
    "CheckStats",
    "CheckResult",
]
