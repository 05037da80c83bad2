"""Base validator class for boundary validators.

Provides default implementation of ValidatorProtocol.
Concrete validators inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from collections.abc import Sequence

    from archbound.domain.model.call import Call
    from archbound.domain.model.configuration import CheckConfig
    from archbound.domain.model.errors import BoundaryError
    from archbound.domain.view import BoundaryView


class BaseValidator(ABC):
    """Base class for validators implementing ValidatorProtocol.

    Concrete validators must:
    1. Set `name` class attribute
    2. Implement `validate()` method
    3. Optionally override `from_config()` for conditional activation
    """

    name: str
    """Short validator name, used in logs."""

    @abstractmethod
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

    @classmethod
    def from_config(cls, config: CheckConfig) -> Self | None:
        """Create validator from config.

        Default: always enabled (returns new instance).
        Override in subclass for conditional activation.

        Args:
            config: Check configuration

        Returns:
            Validator instance if enabled, None if disabled
        """
        return cls()
