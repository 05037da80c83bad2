"""Observed inter-module call."""

from __future__ import annotations

from dataclasses import dataclass

from archbound.domain.model.enums import DependencyKind
from archbound.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class Callee:
    """Referenced symbol: module.function/arity."""

    module: str
    function: str
    arity: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.module:
            raise ValueError("module must not be empty")
        if not self.function:
            raise ValueError("function must not be empty")
        if self.arity < 0:
            raise ValueError(f"arity must be >= 0, got {self.arity}")

    def __str__(self) -> str:
        """Format as module.function/arity."""
        return f"{self.module}.{self.function}/{self.arity}"


@dataclass(frozen=True, slots=True)
class Call:
    """Reference from one module to another.

    Attributes:
        caller_module: Module containing the call site
        callee: Referenced symbol
        mode: COMPILE (e.g. macro expansion) or RUNTIME
        location: Call site
    """

    caller_module: str
    callee: Callee
    location: Location
    mode: DependencyKind = DependencyKind.RUNTIME

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.caller_module:
            raise ValueError("caller_module must not be empty")

    @property
    def callee_module(self) -> str:
        """Module that defines the referenced symbol."""
        return self.callee.module
