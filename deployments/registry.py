"""Static table of the tokenization suite's deployments per network."""

from typing import Dict, Tuple, Union

from .models import NetworkDeployment


class UnknownNetworkError(KeyError):
    """Raised when a network is not in the deployment table."""

    def __str__(self) -> str:
        return f"Unknown network: {self.args[0]}"


_DEPLOYMENTS: Dict[int, NetworkDeployment] = {
    43113: NetworkDeployment(
        chain_id=43113,
        name="fuji",
        asset_tokenization_manager="0x402A7859717f8fd0b1b8F806653dA7225E9e45CC",
        verifying_operator_vault="0xc3fA909dE581E27b00CF405dE306b0837FEae6fE",
        real_estate_registry="0xe59C3a42253FB12f10989CAE9FDb628d8e559a25",
        usdc="0xCd183631ebBcbd2109DC4a0E5D4D53f7fB3CE65e",
        estate_verification="0xAACA34E586ddebdd846a8C25c90A3CcC7670d77D",
    ),
    11155111: NetworkDeployment(
        chain_id=11155111,
        name="sepolia",
        asset_tokenization_manager="0x11AB634C07d7705569725CfAF826ecE95b22E2cA",
        verifying_operator_vault="0x004b9C31Fbc37048E03fdd9c78ddd092C124fCdC",
        real_estate_registry="0x316d970b3f4e1a4d4ab26b0DBaCDE791e9D3d1D5",
        usdc="0xaCbB4E4AdA2F74aC8df1aC382B86ce8CB0174206",
        estate_verification="0x27d6bC526CFaa12b3975E56F78807d5Be792706E",
    ),
}


def list_deployments() -> Tuple[NetworkDeployment, ...]:
    return tuple(_DEPLOYMENTS[chain_id] for chain_id in sorted(_DEPLOYMENTS))


def get_deployment(network: Union[int, str]) -> NetworkDeployment:
    """Look up a deployment by chain id, numeric string, or network name."""
    if isinstance(network, bool):
        raise UnknownNetworkError(network)
    if isinstance(network, int):
        chain_id = network
    else:
        normalized = str(network).strip().lower()
        if normalized.isdigit():
            chain_id = int(normalized)
        else:
            for deployment in _DEPLOYMENTS.values():
                if deployment.name == normalized:
                    return deployment
            raise UnknownNetworkError(network)

    try:
        return _DEPLOYMENTS[chain_id]
    except KeyError:
        raise UnknownNetworkError(network) from None
