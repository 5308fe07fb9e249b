"""Link reconciliation API."""

from .ConflictError import ConflictError
from .enumerate_entries import enumerate_entries
from .LinkSpec import LinkSpec
from .reconcile_link import reconcile_link
from .ReconcileResult import ReconcileResult
from .ReconcileStatus import ReconcileStatus
from .SourceEntry import SourceEntry

__all__ = [
    "ConflictError",
    "LinkSpec",
    "ReconcileResult",
    "ReconcileStatus",
    "SourceEntry",
    "enumerate_entries",
    "reconcile_link",
]
