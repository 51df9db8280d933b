"""Unsigned oracle fulfillment payloads and dry-run output."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from estate_adapter.models import EstateRecord


@dataclass(frozen=True)
class FulfillmentPayload:
    chain_id: int
    to_address: str
    data: str
    value_wei: int = 0


@dataclass(frozen=True)
class DryRunResult:
    success: bool
    request_id: str
    record: Optional[EstateRecord]
    error_message: str = ""
    notes: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, object]:
        return {
            "success": self.success,
            "request_id": self.request_id,
            "record": self.record.to_dict() if self.record else None,
            "error_message": self.error_message,
            "notes": list(self.notes),
        }
