from .models import NetworkDeployment
from .registry import UnknownNetworkError, get_deployment, list_deployments

__all__ = [
    "NetworkDeployment",
    "UnknownNetworkError",
    "get_deployment",
    "list_deployments",
]
