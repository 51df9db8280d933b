"""Deployed contract addresses for one network."""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class NetworkDeployment:
    chain_id: int
    name: str
    asset_tokenization_manager: str
    verifying_operator_vault: str
    real_estate_registry: str
    usdc: str
    estate_verification: str

    def contracts(self) -> Dict[str, str]:
        return {
            "asset_tokenization_manager": self.asset_tokenization_manager,
            "verifying_operator_vault": self.verifying_operator_vault,
            "real_estate_registry": self.real_estate_registry,
            "usdc": self.usdc,
            "estate_verification": self.estate_verification,
        }

    def to_dict(self) -> Dict[str, object]:
        return {"chain_id": self.chain_id, "name": self.name, **self.contracts()}
