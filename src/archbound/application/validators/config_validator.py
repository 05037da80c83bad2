"""Boundary declaration consistency validator.

Reports declarations that contradict the boundary hierarchy instead of
refusing to build the view. Always enabled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from archbound.application.validators._base import BaseValidator
from archbound.domain.model.errors import InvalidConfig

if TYPE_CHECKING:
    from collections.abc import Sequence

    from archbound.domain.model.boundary import Boundary
    from archbound.domain.model.call import Call
    from archbound.domain.model.errors import BoundaryError
    from archbound.domain.view import BoundaryView


class ConfigValidator(BaseValidator):
    """Checks ancestor chains and app ownership against the hierarchy."""

    name = "config"

    def validate(
        self,
        view: BoundaryView,
        calls: Sequence[Call],
    ) -> tuple[BoundaryError, ...]:
        errors: list[BoundaryError] = []
        for boundary in view:
            reason = self._inconsistency(view, boundary)
            if reason is not None:
                errors.append(InvalidConfig(boundary.name, reason, boundary.location))
        return tuple(errors)

    def _inconsistency(self, view: BoundaryView, boundary: Boundary) -> str | None:
        expected = view.expected_ancestors(boundary.name)
        if boundary.ancestors != expected:
            return f"ancestors {list(boundary.ancestors)} do not match enclosing boundaries {list(expected)}"

        parent = view.parent_of(boundary)
        if parent is not None and parent.app != boundary.app:
            return f"app {boundary.app!r} differs from app {parent.app!r} of parent {parent.name}"

        return None
