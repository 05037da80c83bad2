"""Source code location value object."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Location:
    """Position of a declaration or call in source code.

    Attributes:
        file: Path to source file
        line: Line number (1-based, must be > 0)
    """

    file: Path
    line: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file is None:
            raise TypeError("file must not be None")
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")

    def __str__(self) -> str:
        """Format as file:line."""
        return f"{self.file}:{self.line}"
