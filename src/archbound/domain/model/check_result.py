"""Check result aggregate."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

from archbound.domain.model.check_stats import CheckStats

if TYPE_CHECKING:
    from collections.abc import Mapping

    from archbound.domain.model.enums import ErrorKind
    from archbound.domain.model.errors import BoundaryError


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of a validation run.

    Immutable aggregate handed to reporters.
    An empty error tuple means the checked unit passed.

    Attributes:
        app: App under check
        errors: All errors, concatenated in validator order
        stats: Run statistics
    """

    app: str
    errors: tuple[BoundaryError, ...]
    stats: CheckStats

    @property
    def passed(self) -> bool:
        """Check if validation passed (no errors)."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Number of errors."""
        return len(self.errors)

    def errors_of(self, kind: ErrorKind) -> tuple[BoundaryError, ...]:
        """Get errors of one kind, in report order."""
        return tuple(error for error in self.errors if error.kind is kind)

    def count_by_kind(self) -> Mapping[ErrorKind, int]:
        """Count errors per kind."""
        return Counter(error.kind for error in self.errors)

    def assert_passed(self) -> None:
        """Raise if any error was found.

        Raises:
            BoundaryViolationError: If errors is non-empty
        """
        from archbound.domain.exceptions import BoundaryViolationError

        if self.errors:
            raise BoundaryViolationError(self.errors)

    @classmethod
    def empty(cls, app: str) -> CheckResult:
        """Create empty check result (passed, no errors)."""
        return cls(app=app, errors=(), stats=CheckStats.empty())
