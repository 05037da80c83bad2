"""Validator registry for boundary validators.

Central registry of all validators with factory functions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from archbound.application.validators._base import BaseValidator
from archbound.application.validators.call_validator import CallValidator
from archbound.application.validators.config_validator import ConfigValidator
from archbound.application.validators.cycle_validator import CycleValidator
from archbound.application.validators.dependency_validator import DependencyValidator
from archbound.application.validators.export_validator import ExportValidator
from archbound.application.validators.ignores_validator import IgnoresValidator
from archbound.application.validators.unclassified_validator import UnclassifiedValidator
from archbound.domain.model.configuration import CheckConfig

if TYPE_CHECKING:
    from archbound.domain.ports.validator import ValidatorProtocol


# Registry - tuple for immutability
# Order matters: errors are concatenated in this order
_ALL_VALIDATORS: tuple[type[BaseValidator], ...] = (
    ConfigValidator,  # Always enabled
    IgnoresValidator,  # Always enabled
    DependencyValidator,  # Always enabled
    ExportValidator,  # If config.check_exports
    CycleValidator,  # If config.check_cycles
    UnclassifiedValidator,  # If config.check_unclassified
    CallValidator,  # If config.check_calls
)


def default_validators() -> tuple[ValidatorProtocol, ...]:
    """Instantiate validators for the default config.

    Returns:
        Tuple of validators enabled by CheckConfig()
    """
    return validators_from_config(CheckConfig())


def validators_from_config(config: CheckConfig) -> tuple[ValidatorProtocol, ...]:
    """Instantiate validators based on config.

    Validators are created using their from_config() factory method.
    If from_config() returns None, the validator is disabled.

    Args:
        config: Check configuration

    Returns:
        Tuple of enabled validators, in registry order
    """
    validators: list[ValidatorProtocol] = []

    for validator_cls in _ALL_VALIDATORS:
        validator = validator_cls.from_config(config)
        if validator is not None:
            validators.append(validator)

    return tuple(validators)
