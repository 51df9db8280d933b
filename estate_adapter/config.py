"""Explicit configuration for the estate data adapter."""

from dataclasses import dataclass
import logging
import math
import os
from typing import Mapping, Optional
from urllib.parse import quote

from eth_utils import is_address, to_checksum_address

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://estate-backend-liart.vercel.app"
USER_PATH_TEMPLATE = "/api/v1/user/eth/{user_id}"
API_KEY_HEADER = "x-api-key"
DEFAULT_TIMEOUT_S = 10.0

# Stand-in operator until a real verifying operator is configured.
PLACEHOLDER_VERIFYING_OPERATOR = "0x0000000000000000000000000000000000000000"

ENV_API_KEY = "ESTATE_API_KEY"
ENV_BASE_URL = "ESTATE_API_BASE_URL"
ENV_VERIFYING_OPERATOR = "ESTATE_VERIFYING_OPERATOR"
ENV_TIMEOUT_S = "ESTATE_TIMEOUT_S"


@dataclass(frozen=True)
class AdapterConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    verifying_operator: str = PLACEHOLDER_VERIFYING_OPERATOR
    timeout_s: float = DEFAULT_TIMEOUT_S

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ValueError("API key is required.")
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError("Base URL must use http or https.")
        if not math.isfinite(self.timeout_s) or self.timeout_s <= 0:
            raise ValueError("Timeout must be a positive, finite number.")
        if not isinstance(self.verifying_operator, str) or not is_address(self.verifying_operator):
            raise ValueError(f"Invalid verifying operator address: {self.verifying_operator!r}")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        object.__setattr__(self, "verifying_operator", to_checksum_address(self.verifying_operator))

    @property
    def uses_placeholder_operator(self) -> bool:
        return self.verifying_operator == PLACEHOLDER_VERIFYING_OPERATOR

    def user_url(self, user_id: str) -> str:
        return self.base_url + USER_PATH_TEMPLATE.format(user_id=quote(user_id, safe=""))

    def __repr__(self) -> str:
        return (
            f"AdapterConfig(api_key='***', base_url={self.base_url!r}, "
            f"verifying_operator={self.verifying_operator!r}, timeout_s={self.timeout_s!r})"
        )

    @staticmethod
    def from_env(
        environ: Optional[Mapping[str, str]] = None,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        verifying_operator: Optional[str] = None,
        timeout_s: Optional[float] = None,
    ) -> "AdapterConfig":
        """Build a config from environment variables.

        Explicit keyword arguments take precedence over the environment.
        """
        env = os.environ if environ is None else environ
        raw_timeout = env.get(ENV_TIMEOUT_S)
        if timeout_s is None and raw_timeout:
            try:
                timeout_s = float(raw_timeout)
            except ValueError as exc:
                raise ValueError(f"{ENV_TIMEOUT_S} must be a number.") from exc

        config = AdapterConfig(
            api_key=api_key or env.get(ENV_API_KEY, ""),
            base_url=base_url or env.get(ENV_BASE_URL) or DEFAULT_BASE_URL,
            verifying_operator=(
                verifying_operator
                or env.get(ENV_VERIFYING_OPERATOR)
                or PLACEHOLDER_VERIFYING_OPERATOR
            ),
            timeout_s=timeout_s if timeout_s is not None else DEFAULT_TIMEOUT_S,
        )
        if config.uses_placeholder_operator:
            logger.warning(
                "No verifying operator configured; using placeholder %s. Set %s.",
                PLACEHOLDER_VERIFYING_OPERATOR,
                ENV_VERIFYING_OPERATOR,
            )
        return config
