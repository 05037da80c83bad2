"""Dependency cycle validator.

Builds the boundary dependency graph (edge kind ignored) and reports every
distinct cycle once, keyed by its vertex set.
Enabled when config.check_cycles is set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from archbound.application.validators._base import BaseValidator
from archbound.domain.graph import DiGraph, find_cycles
from archbound.domain.model.errors import Cycle

if TYPE_CHECKING:
    from collections.abc import Sequence

    from archbound.domain.model.call import Call
    from archbound.domain.model.configuration import CheckConfig
    from archbound.domain.model.errors import BoundaryError
    from archbound.domain.view import BoundaryView


class CycleValidator(BaseValidator):
    """Cycle detection over declared dependency edges.

    Edges to undeclared boundaries are left out: the dependency validator
    reports them. A self-dependency is reported both here, as a one-vertex
    cycle, and by the dependency validator.
    """

    name = "cycles"

    def __init__(self, max_length: int | None = None) -> None:
        """Initialize with optional search bound.

        Args:
            max_length: Max cycle length in boundaries. None = unbounded.
        """
        if max_length is not None and max_length < 2:
            raise ValueError(f"max_length must be >= 2, got {max_length}")
        self._max_length = max_length

    @property
    def max_length(self) -> int | None:
        return self._max_length

    def validate(
        self,
        view: BoundaryView,
        calls: Sequence[Call],
    ) -> tuple[BoundaryError, ...]:
        graph = DiGraph.from_edges(
            view.dependency_edges(),
            extra_nodes=view.boundaries.keys(),
        )
        return tuple(Cycle(cycle) for cycle in find_cycles(graph, self._max_length))

    @classmethod
    def from_config(cls, config: CheckConfig) -> Self | None:
        """Create if cycle detection is enabled."""
        if not config.check_cycles:
            return None
        return cls(config.max_cycle_length)
