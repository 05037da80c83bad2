"""Ports: contracts between the validation core and its collaborators."""

from archbound.domain.ports.provider import BoundaryProvider
from archbound.domain.ports.reporter import ReporterProtocol
from archbound.domain.ports.validator import ValidatorProtocol

__all__ = ["BoundaryProvider", "ReporterProtocol", "ValidatorProtocol"]
