"""Module/call provider protocol.

The provider extracts boundaries, module classification and observed calls
from a compiled unit. archbound only consumes what it supplies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from archbound.domain.model.boundary import Boundary
    from archbound.domain.model.call import Call
    from archbound.domain.model.module import ModuleInfo


class BoundaryProvider(Protocol):
    """Contract for module/call providers.

    Boundaries must be fully populated (ancestors, inherited app ownership).
    Modules cover every module the calls may reference, including modules
    of other apps, so that app membership can be resolved.
    """

    @property
    def app(self) -> str:
        """App under check."""
        ...

    def list_boundaries(self) -> Sequence[Boundary]:
        """All declared boundaries, of the checked app and its dependencies."""
        ...

    def list_modules(self) -> Sequence[ModuleInfo]:
        """Classification of every known module."""
        ...

    def classify(self, module: str) -> str | None:
        """Owning boundary name of a module (None if unclassified)."""
        ...

    def unclassified_modules(self) -> Sequence[str]:
        """Modules of the checked app owned by no boundary."""
        ...

    def list_calls(self) -> Sequence[Call]:
        """Observed inter-module calls of the checked app."""
        ...
