"""Domain enumerations."""

from enum import Enum, auto


class BoundaryKind(Enum):
    """Boundary strictness."""

    STRICT = auto()  # no inherited allowances
    RELAXED = auto()


class DependencyKind(Enum):
    """Dependency edge kind, also used as the mode of an observed call."""

    COMPILE = auto()  # resolved at compile time (macro expansion)
    RUNTIME = auto()


class ExportMatching(Enum):
    """How a subtree export rule decides that a module lies under its root."""

    PREFIX = auto()  # raw string prefix of the dotted path
    SEGMENT = auto()  # root itself or root + "." prefix


class ErrorKind(Enum):
    """Tagged kinds of boundary errors.

    Grouped by the validator that produces them:
    - Config: INVALID_CONFIG, INVALID_IGNORES, ANCESTOR_WITH_IGNORED_CHECKS
    - Dependencies: UNKNOWN_DEPENDENCY, CHECK_IN_DISABLED_DEPENDENCY, FORBIDDEN_DEPENDENCY
    - Exports: UNKNOWN_EXPORT, EXPORT_NOT_IN_BOUNDARY
    - Graph: CYCLE, UNCLASSIFIED_MODULE
    - Calls: INVALID_EXTERNAL_DEPENDENCY_CALL, FORBIDDEN_CALL,
      RUNTIME_DEPENDENCY_MISMATCH, NOT_EXPORTED
    """

    INVALID_CONFIG = "invalid_config"
    INVALID_IGNORES = "invalid_ignores"
    ANCESTOR_WITH_IGNORED_CHECKS = "ancestor_with_ignored_checks"

    UNKNOWN_DEPENDENCY = "unknown_dependency"
    CHECK_IN_DISABLED_DEPENDENCY = "check_in_disabled_dependency"
    FORBIDDEN_DEPENDENCY = "forbidden_dependency"

    UNKNOWN_EXPORT = "unknown_export"
    EXPORT_NOT_IN_BOUNDARY = "export_not_in_boundary"

    CYCLE = "cycle"
    UNCLASSIFIED_MODULE = "unclassified_module"

    INVALID_EXTERNAL_DEPENDENCY_CALL = "invalid_external_dependency_call"
    FORBIDDEN_CALL = "forbidden_call"
    RUNTIME_DEPENDENCY_MISMATCH = "runtime_dependency_mismatch"
    NOT_EXPORTED = "not_exported"
