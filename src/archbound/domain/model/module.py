"""Module classification value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ModuleInfo:
    """A module of the compiled unit, as classified by the provider.

    Attributes:
        name: Dotted module name
        app: Owning app (None if unknown)
        boundary: Owning boundary name (None if unclassified)
        macros: (name, arity) pairs of macros the module exports
        protocol_impl: Module implements a protocol declared elsewhere
    """

    name: str
    app: str | None = None
    boundary: str | None = None
    macros: frozenset[tuple[str, int]] = frozenset()
    protocol_impl: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if self.boundary is not None and self.app is None:
            raise ValueError(f"classified module {self.name!r} must belong to an app")
        for macro_name, arity in self.macros:
            if not macro_name:
                raise ValueError(f"macro name must not be empty in {self.name!r}")
            if arity < 0:
                raise ValueError(f"macro arity must be >= 0, got {arity}")

    @property
    def is_classified(self) -> bool:
        """Check if module belongs to a boundary."""
        return self.boundary is not None

    def exports_macro(self, name: str, arity: int) -> bool:
        """Check if module exports the macro name/arity."""
        return (name, arity) in self.macros
