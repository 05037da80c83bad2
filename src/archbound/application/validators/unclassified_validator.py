"""Unclassified module validator.

Enabled when config.check_unclassified is set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from archbound.application.validators._base import BaseValidator
from archbound.domain.model.errors import UnclassifiedModule

if TYPE_CHECKING:
    from collections.abc import Sequence

    from archbound.domain.model.call import Call
    from archbound.domain.model.configuration import CheckConfig
    from archbound.domain.model.errors import BoundaryError
    from archbound.domain.view import BoundaryView


class UnclassifiedValidator(BaseValidator):
    """Reports modules owned by no boundary, protocol implementations excepted."""

    name = "unclassified"

    def validate(
        self,
        view: BoundaryView,
        calls: Sequence[Call],
    ) -> tuple[BoundaryError, ...]:
        return tuple(
            UnclassifiedModule(module.name)
            for module in view.unclassified_modules()
            if not module.protocol_impl
        )

    @classmethod
    def from_config(cls, config: CheckConfig) -> Self | None:
        """Create if unclassified reporting is enabled."""
        if not config.check_unclassified:
            return None
        return cls()
