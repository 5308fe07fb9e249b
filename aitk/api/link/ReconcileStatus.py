"""Outcome of reconciling one link."""

from enum import Enum


class ReconcileStatus(str, Enum):
    CREATED = "created"
    ALREADY_LINKED = "already-linked"
    RELINKED = "relinked"
    CONFLICT = "conflict"
    ERROR = "error"

    @property
    def ok(self) -> bool:
        """True when the target ended up linked to the source."""
        return self in (ReconcileStatus.CREATED, ReconcileStatus.ALREADY_LINKED, ReconcileStatus.RELINKED)
