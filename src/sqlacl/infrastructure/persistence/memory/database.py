"""In-memory database: one published snapshot, one writer at a time."""

import threading

from sqlacl.infrastructure.persistence.memory.state import AclState


class InMemoryDatabase:
    """Copy-on-write holder of the access control state.

    Readers take the published snapshot without locking. A writer holds
    write_lock, mutates a private copy and publishes it with a single
    reference swap, so readers see the whole old or the whole new state.
    """

    def __init__(self, state: AclState | None = None) -> None:
        self._state = state.copy() if state is not None else AclState()
        self._state.read_only = True
        self.write_lock = threading.Lock()

    def snapshot(self) -> AclState:
        """Current published state (read-only)."""
        return self._state

    def publish(self, state: AclState) -> None:
        """Replace the published state. Caller must hold write_lock."""
        state.read_only = True
        self._state = state
