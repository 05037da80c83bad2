"""Validator protocol for boundary validators.

Validators are stateless: each reads only the immutable view and call list,
and returns an independent tuple of errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from collections.abc import Sequence

    from archbound.domain.model.call import Call
    from archbound.domain.model.configuration import CheckConfig
    from archbound.domain.model.errors import BoundaryError
    from archbound.domain.view import BoundaryView


class ValidatorProtocol(Protocol):
    """Contract for validators.

    Key pattern: from_config() returns None if validator should be disabled.

    Example:
        class NoDeepNestingValidator:
            def validate(
                self,
                view: BoundaryView,
                calls: Sequence[Call],
            ) -> tuple[BoundaryError, ...]:
                return tuple(
                    InvalidConfig(b.name, "nested too deep", b.location)
                    for b in view
                    if len(b.ancestors) > 3
                )

            @classmethod
            def from_config(cls, config: CheckConfig) -> Self | None:
                return cls()
    """

    def validate(
        self,
        view: BoundaryView,
        calls: Sequence[Call],
    ) -> tuple[BoundaryError, ...]:
        """Validate and return errors.

        Args:
            view: Immutable boundary view
            calls: Observed calls

        Returns:
            Tuple of errors found (empty if valid)
        """
        ...

    @classmethod
    def from_config(cls, config: CheckConfig) -> Self | None:
        """Create validator from config.

        Args:
            config: Check configuration

        Returns:
            Validator instance if enabled, None if disabled
        """
        ...
