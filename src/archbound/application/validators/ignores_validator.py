"""Disabled-checks placement validator.

Disabling checks is only meaningful on top-level boundaries of the app
under check. Always enabled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from archbound.application.validators._base import BaseValidator
from archbound.domain.model.errors import AncestorWithIgnoredChecks, InvalidIgnores

if TYPE_CHECKING:
    from collections.abc import Sequence

    from archbound.domain.model.call import Call
    from archbound.domain.model.errors import BoundaryError
    from archbound.domain.view import BoundaryView


class IgnoresValidator(BaseValidator):
    """Reports check opt-outs on sub-boundaries and under opted-out ancestors.

    Errors, per boundary of the checked app that disables checks, in name order:
    - InvalidIgnores: boundary has ancestors and disables check_in/check_out
    - AncestorWithIgnoredChecks: one per ancestor that also disables checks
    """

    name = "ignores"

    def validate(
        self,
        view: BoundaryView,
        calls: Sequence[Call],
    ) -> tuple[BoundaryError, ...]:
        errors: list[BoundaryError] = []

        for boundary in view.boundaries_of_app(view.app):
            if not boundary.ignores_checks:
                continue

            if boundary.ancestors:
                errors.append(InvalidIgnores(boundary.name, boundary.location))

            for ancestor in view.ancestors_of(boundary):
                if ancestor.ignores_checks:
                    errors.append(
                        AncestorWithIgnoredChecks(boundary.name, ancestor.name, boundary.location)
                    )

        return tuple(errors)
