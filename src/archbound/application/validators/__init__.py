"""Boundary validators.

Validators check a BoundaryView and the observed calls:
- ConfigValidator: Declarations consistent with the hierarchy
- IgnoresValidator: check_in/check_out opt-out placement
- DependencyValidator: Dependency existence and structural legality
- ExportValidator: Exported modules belong to the boundary
- CycleValidator: Dependency cycles
- UnclassifiedValidator: Modules outside every boundary
- CallValidator: Cross-boundary call legality
"""

from archbound.application.validators._base import BaseValidator
from archbound.application.validators._registry import (
    default_validators,
    validators_from_config,
)
from archbound.application.validators.call_validator import CallValidator
from archbound.application.validators.config_validator import ConfigValidator
from archbound.application.validators.cycle_validator import CycleValidator
from archbound.application.validators.dependency_validator import DependencyValidator
from archbound.application.validators.export_validator import ExportValidator
from archbound.application.validators.ignores_validator import IgnoresValidator
from archbound.application.validators.unclassified_validator import UnclassifiedValidator

__all__ = [
    # Base
    "BaseValidator",
    # Validators
    "ConfigValidator",
    "IgnoresValidator",
    "DependencyValidator",
    "ExportValidator",
    "CycleValidator",
    "UnclassifiedValidator",
    "CallValidator",
    # Factory functions
    "default_validators",
    "validators_from_config",
]
