"""Application services."""

from archbound.application.services.boundary_checker import BoundaryChecker
from archbound.application.services.view_cache import ViewCache

__all__ = ["BoundaryChecker", "ViewCache"]
