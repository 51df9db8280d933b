"""Fetch estate metadata and pack it for on-chain verification."""

import logging
from typing import Any, Optional

from .config import API_KEY_HEADER, AdapterConfig
from .encoding import encode_estate_record
from .errors import RequestFailure
from .models import EstateRecord
from .schema import parse_estate_response
from .transport import Fetcher, HttpResponse, UrllibFetcher

logger = logging.getLogger(__name__)


class EstateDataAdapter:
    """Turns one user id into one ABI-encoded estate payload.

    Each call is a single linear request, parse, encode pipeline. The adapter
    keeps only immutable configuration, so concurrent calls share no state.
    """

    def __init__(self, config: AdapterConfig, fetcher: Optional[Fetcher] = None) -> None:
        self._config = config
        self._fetcher = fetcher or UrllibFetcher()

    @property
    def config(self) -> AdapterConfig:
        return self._config

    def fetch_and_encode(self, user_id: str) -> bytes:
        record = self.fetch_record(user_id)
        encoded = encode_estate_record(record)
        logger.debug("Encoded estate payload for %s: %d bytes", user_id, len(encoded))
        return encoded

    def fetch_record(self, user_id: str) -> EstateRecord:
        if not isinstance(user_id, str) or not user_id.strip():
            raise ValueError("User id must be a non-empty string.")

        url = self._config.user_url(user_id)
        logger.info("Fetching estate data for user %s", user_id)
        response = self._fetcher.get(
            url,
            {API_KEY_HEADER: self._config.api_key},
            self._config.timeout_s,
        )
        _raise_for_error(response)

        record = parse_estate_response(response.data, self._config.verifying_operator)
        logger.debug(
            "Estate record for %s: cost=%s percentage=%s approved=%s salt=%s operator=%s",
            user_id,
            record.estate_cost,
            record.percentage_to_tokenize,
            record.is_approved,
            record.salt_bytes.hex(),
            record.verifying_operator,
        )
        return record


def _raise_for_error(response: HttpResponse) -> None:
    if response.error:
        detail = _remote_message(response.data) or response.message or f"HTTP {response.status}"
        raise RequestFailure(f"Request failed, check the parameters provided: {detail}")

    body = response.data
    if isinstance(body, dict) and body.get("error"):
        detail = _remote_message(body) or str(body["error"])
        raise RequestFailure(f"Request failed, check the parameters provided: {detail}")


def _remote_message(body: Any) -> str:
    if not isinstance(body, dict):
        return ""
    message = body.get("message")
    if isinstance(message, str):
        return message
    error = body.get("error")
    if isinstance(error, str):
        return error
    return ""
