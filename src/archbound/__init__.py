"""archbound - hierarchical module-boundary validation engine."""

__version__ = "0.1.0"

from archbound.application.services.boundary_checker import BoundaryChecker
from archbound.domain.model.check_result import CheckResult
from archbound.domain.model.configuration import CheckConfig
from archbound.domain.view import BoundaryView

__all__ = ["BoundaryChecker", "BoundaryView", "CheckConfig", "CheckResult", "__version__"]
