"""Decode and check a fulfillment payload without network calls."""

from eth_abi import decode
from eth_abi.exceptions import DecodingError
from eth_utils import is_address

from estate_adapter.encoding import PayloadDecodeError, decode_estate_payload, payload_from_hex, to_hex

from .builder import FULFILLMENT_ARG_TYPES, FULFILLMENT_SELECTOR
from .models import DryRunResult, FulfillmentPayload


class SimulationError(ValueError):
    """Raised when a dry-run simulation cannot be performed."""


def simulate(payload: FulfillmentPayload) -> DryRunResult:
    _validate_payload(payload)
    try:
        calldata = payload_from_hex(payload.data)
    except PayloadDecodeError as exc:
        raise SimulationError("Payload data is not valid hex.") from exc
    if calldata[:4] != FULFILLMENT_SELECTOR:
        raise SimulationError("Payload does not call handleOracleFulfillment.")

    try:
        request_id, response, err = decode(FULFILLMENT_ARG_TYPES, calldata[4:])
    except DecodingError as exc:
        raise SimulationError(f"Fulfillment arguments do not decode: {exc}") from exc

    request_hex = to_hex(request_id)
    if err:
        return DryRunResult(
            success=False,
            request_id=request_hex,
            record=None,
            error_message=err.decode("utf-8", errors="replace"),
            notes=("Oracle reported an error; response not decoded.",),
        )

    try:
        record = decode_estate_payload(response)
    except PayloadDecodeError as exc:
        return DryRunResult(
            success=False,
            request_id=request_hex,
            record=None,
            error_message=str(exc),
            notes=("Dry-run only; no execution performed.",),
        )

    return DryRunResult(
        success=True,
        request_id=request_hex,
        record=record,
        notes=("Dry-run only; no execution performed.",),
    )


def _validate_payload(payload: FulfillmentPayload) -> None:
    if not payload.to_address or not is_address(payload.to_address):
        raise SimulationError("Payload must include a valid target address.")
    if not payload.data.startswith("0x"):
        raise SimulationError("Payload data must be hex-prefixed.")
    if payload.value_wei != 0:
        raise SimulationError("Fulfillment calls carry no value.")
