"""Check statistics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CheckStats:
    """Statistics from a validation run.

    Attributes:
        boundaries_checked: Number of boundaries in the view
        modules_checked: Number of modules known to the view
        calls_checked: Number of observed calls
        validators_run: Number of validators executed
        analysis_time_ms: Total validation time in milliseconds
    """

    boundaries_checked: int
    modules_checked: int
    calls_checked: int
    validators_run: int
    analysis_time_ms: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.boundaries_checked < 0:
            raise ValueError(f"boundaries_checked must be >= 0, got {self.boundaries_checked}")
        if self.modules_checked < 0:
            raise ValueError(f"modules_checked must be >= 0, got {self.modules_checked}")
        if self.calls_checked < 0:
            raise ValueError(f"calls_checked must be >= 0, got {self.calls_checked}")
        if self.validators_run < 0:
            raise ValueError(f"validators_run must be >= 0, got {self.validators_run}")
        if self.analysis_time_ms < 0:
            raise ValueError(f"analysis_time_ms must be >= 0, got {self.analysis_time_ms}")

    @classmethod
    def empty(cls) -> CheckStats:
        """Create empty check stats."""
        return cls(
            boundaries_checked=0,
            modules_checked=0,
            calls_checked=0,
            validators_run=0,
            analysis_time_ms=0.0,
        )
