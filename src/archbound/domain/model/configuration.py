"""Check configuration.

Enables/disables validators and tunes their behavior.
None = feature disabled/unbounded, value = feature enabled with that config.
"""

from __future__ import annotations

from dataclasses import dataclass

from archbound.domain.model.enums import ExportMatching


@dataclass(frozen=True, slots=True)
class CheckConfig:
    """Immutable configuration with FAIL-FIRST validation.

    Attributes:
        # Validators
        check_exports: Run the export validator.
        check_cycles: Run the cycle detector.
        check_unclassified: Report modules outside every boundary.
        check_calls: Run the call legality engine.

        # Tuning
        max_cycle_length: Bound on cycle search depth. None = unbounded.
        export_matching: PREFIX (raw dotted-string prefix) or SEGMENT
            (segment-aware) matching for subtree export rules.

        # Execution
        parallel: Run validators concurrently on a thread pool.
        max_workers: Pool size. None = executor default.
    """

    # Validators
    check_exports: bool = True
    check_cycles: bool = True
    check_unclassified: bool = True
    check_calls: bool = True

    # Tuning
    max_cycle_length: int | None = None
    export_matching: ExportMatching = ExportMatching.PREFIX

    # Execution
    parallel: bool = False
    max_workers: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_cycle_length is not None and self.max_cycle_length < 2:
            raise ValueError(f"max_cycle_length must be >= 2, got {self.max_cycle_length}")

        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")

        if self.max_workers is not None and not self.parallel:
            raise ValueError("max_workers requires parallel=True")
