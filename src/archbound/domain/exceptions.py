"""Domain exceptions: all public errors of archbound.

Boundary violations found by validation are data (BoundaryError values).
Exceptions are reserved for input that cannot be validated at all,
and for callers that explicitly ask to fail on violations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archbound.domain.model.errors import BoundaryError


class ArchBoundError(Exception):
    """Base for all archbound error exceptions.

    Allows: except ArchBoundError to catch all library errors.
    """


class ViewConstructionError(ArchBoundError, ValueError):
    """Provider data cannot form a BoundaryView.

    Inherits ValueError for semantic correctness (malformed input).

    Attributes:
        reason: What made the data unusable
    """

    def __init__(self, reason: str) -> None:
        """Initialize with reason."""
        if not reason:
            raise ValueError("reason must not be empty")
        self.reason = reason
        super().__init__(f"Cannot build boundary view: {reason}")


class BoundaryViolationError(ArchBoundError):
    """Boundary rules violated.

    Raised by CheckResult.assert_passed() when errors were found.

    Attributes:
        errors: All found errors
    """

    def __init__(self, errors: tuple[BoundaryError, ...]) -> None:
        if not errors:
            raise ValueError("BoundaryViolationError requires at least one error")

        self.errors = errors

        msg_parts = [f"Found {len(errors)} boundary error(s):"]
        for error in errors:
            where = f" ({error.location})" if error.location is not None else ""
            msg_parts.append(f"  [{error.kind.value}] {error.message}{where}")

        super().__init__("\n".join(msg_parts))
