"""Dependency declaration validator.

Every declared edge must target a known, checkable boundary that the
declaring boundary is structurally allowed to depend on. Always enabled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from archbound.application.validators._base import BaseValidator
from archbound.domain.model.errors import (
    CheckInDisabledDependency,
    ForbiddenDependency,
    UnknownDependency,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from archbound.domain.model.boundary import Boundary, Dependency
    from archbound.domain.model.call import Call
    from archbound.domain.model.errors import BoundaryError
    from archbound.domain.view import BoundaryView


def is_dependency_allowed(view: BoundaryView, boundary: Boundary, dep: Dependency) -> bool:
    """Check structural legality of boundary → dep.

    Allowed targets:
    - the parent itself
    - a boundary with the same parent (both top-level counts)
    - an edge of the same kind the parent declares (inherited)

    Self-dependency is never allowed.
    """
    if dep.name == boundary.name:
        return False

    parent_name = view.parents.get(boundary.name)
    if parent_name == dep.name or view.parents.get(dep.name) == parent_name:
        return True

    parent = view.parent_of(boundary)
    return parent is not None and parent.depends_on(dep.name, dep.kind)


class DependencyValidator(BaseValidator):
    """Checks every (boundary, dependency) pair in declaration order.

    First failing rule wins:
    1. UnknownDependency: target not declared
    2. CheckInDisabledDependency: target has check_in disabled
    3. ForbiddenDependency: self-dependency, or not parent/sibling/inherited
    """

    name = "dependencies"

    def validate(
        self,
        view: BoundaryView,
        calls: Sequence[Call],
    ) -> tuple[BoundaryError, ...]:
        errors: dict[BoundaryError, None] = {}

        for boundary in view:
            for dep in boundary.dependencies:
                error = self._check(view, boundary, dep)
                if error is not None:
                    errors[error] = None

        return tuple(errors)

    def _check(self, view: BoundaryView, boundary: Boundary, dep: Dependency) -> BoundaryError | None:
        target = view.get(dep.name)
        if target is None:
            return UnknownDependency(dep.name, boundary.location)
        if not target.check_in:
            return CheckInDisabledDependency(dep.name, boundary.location)
        if not is_dependency_allowed(view, boundary, dep):
            return ForbiddenDependency(dep.name, boundary.location)
        return None
