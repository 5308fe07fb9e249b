"""Result of reconciling one LinkSpec."""

from dataclasses import dataclass
from typing import Any

from .LinkSpec import LinkSpec
from .ReconcileStatus import ReconcileStatus


@dataclass(frozen=True)
class ReconcileResult:
    """Status for a single link reconciliation."""

    spec: LinkSpec
    status: ReconcileStatus
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.status.ok

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.spec.category,
            "name": self.spec.name,
            "source": str(self.spec.source),
            "target": str(self.spec.target),
            "status": self.status.value,
            "reason": self.reason,
        }
