"""Export declaration validator.

Enabled when config.check_exports is set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from archbound.application.validators._base import BaseValidator
from archbound.domain.model.boundary import ExactExport, SubtreeExport
from archbound.domain.model.errors import ExportNotInBoundary, UnknownExport

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from archbound.domain.model.boundary import Boundary
    from archbound.domain.model.call import Call
    from archbound.domain.model.configuration import CheckConfig
    from archbound.domain.model.errors import BoundaryError
    from archbound.domain.view import BoundaryView


def _modules_to_check(boundary: Boundary) -> Iterator[str]:
    """Yield modules whose membership an export rule asserts.

    Only the exceptions of a subtree rule are named explicitly;
    the rest of the subtree is not checked module by module.
    """
    for rule in boundary.exports:
        match rule:
            case ExactExport(module=module):
                yield module
            case SubtreeExport(except_=excluded):
                yield from excluded


class ExportValidator(BaseValidator):
    """Checks that exported modules exist and belong to the boundary.

    A boundary may also export the root module of a direct child boundary.
    Errors are deduplicated and ordered by (module, location).
    """

    name = "exports"

    def validate(
        self,
        view: BoundaryView,
        calls: Sequence[Call],
    ) -> tuple[BoundaryError, ...]:
        errors: set[UnknownExport | ExportNotInBoundary] = set()

        for boundary in view:
            for module in _modules_to_check(boundary):
                error = self._check(view, boundary, module)
                if error is not None:
                    errors.add(error)

        return tuple(
            sorted(errors, key=lambda e: (e.module, str(e.location.file), e.location.line))
        )

    def _check(
        self,
        view: BoundaryView,
        boundary: Boundary,
        module: str,
    ) -> UnknownExport | ExportNotInBoundary | None:
        if view.app_of(module) is None:
            return UnknownExport(module, boundary.location)

        if view.parents.get(module) == boundary.name:
            return None

        owner = view.boundary_for(module)
        if owner is None or owner.name != boundary.name:
            return ExportNotInBoundary(module, boundary.name, boundary.location)

        return None

    @classmethod
    def from_config(cls, config: CheckConfig) -> Self | None:
        """Create if export checking is enabled."""
        if not config.check_exports:
            return None
        return cls()
