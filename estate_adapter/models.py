"""Value objects for estate payload encoding."""

from dataclasses import dataclass
from typing import Dict, Tuple

ESTATE_PAYLOAD_TYPES: Tuple[str, ...] = ("uint256", "uint256", "bool", "bytes", "address")

UINT256_MAX = 2**256 - 1


@dataclass(frozen=True)
class EstateRecord:
    estate_cost: int
    percentage_to_tokenize: int
    is_approved: bool
    salt_bytes: bytes
    verifying_operator: str

    def as_abi_values(self) -> Tuple[object, ...]:
        return (
            self.estate_cost,
            self.percentage_to_tokenize,
            self.is_approved,
            self.salt_bytes,
            self.verifying_operator,
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "estate_cost": str(self.estate_cost),
            "percentage_to_tokenize": str(self.percentage_to_tokenize),
            "is_approved": self.is_approved,
            "salt_bytes": "0x" + self.salt_bytes.hex(),
            "verifying_operator": self.verifying_operator,
        }
