"""Boundary Protocols - contracts between the registry core and its collaborators.

Invariants:
    - Core NEVER imports from shell - dependency arrows point inward only
    - Notification, time and persistence accessed through Protocol / callable types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - RegistryRepository is async because implementations do IO; the Registry
      itself never awaits - the shell orchestrates the async calls around it
"""

from datetime import datetime
from typing import Callable, Protocol

from app.core.records import Record


Clock = Callable[[], datetime]


class NotificationSink(Protocol):
    """Receives one structured event per successful creation."""
    def publish(self, event: dict) -> None: ...


class RegistryRepository(Protocol):
    """Contract for record persistence - implemented by shell."""
    async def save(self, record: Record) -> None: ...
    async def load_all(self) -> list[Record]: ...
