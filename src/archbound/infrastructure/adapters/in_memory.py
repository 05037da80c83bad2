"""In-memory module/call provider.

Serves boundaries, modules and calls collected elsewhere (a tracer, an AST
pass, a test) through the BoundaryProvider protocol.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archbound.domain.model.boundary import Boundary
    from archbound.domain.model.call import Call
    from archbound.domain.model.module import ModuleInfo


@dataclass(frozen=True, slots=True)
class InMemoryProvider:
    """Immutable provider over plain tuples.

    Attributes:
        app: App under check
        boundaries: All declared boundaries
        modules: Classification of every known module
        calls: Observed calls of the app under check
    """

    app: str
    boundaries: tuple[Boundary, ...] = ()
    modules: tuple[ModuleInfo, ...] = ()
    calls: tuple[Call, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.app:
            raise ValueError("app must not be empty")

    def list_boundaries(self) -> tuple[Boundary, ...]:
        return self.boundaries

    def list_modules(self) -> tuple[ModuleInfo, ...]:
        return self.modules

    def classify(self, module: str) -> str | None:
        """Owning boundary name of a module (None if unclassified or unknown)."""
        for info in self.modules:
            if info.name == module:
                return info.boundary
        return None

    def unclassified_modules(self) -> tuple[str, ...]:
        """Modules of the app under check owned by no boundary, in name order."""
        return tuple(
            sorted(m.name for m in self.modules if m.boundary is None and m.app == self.app)
        )

    def list_calls(self) -> tuple[Call, ...]:
        return self.calls
