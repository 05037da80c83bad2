"""Provider adapters."""

from archbound.infrastructure.adapters.in_memory import InMemoryProvider

__all__ = ["InMemoryProvider"]
