"""Build the oracle callback that hands an estate payload to EstateVerification."""

from typing import Union

from eth_abi import encode
from eth_utils import function_signature_to_4byte_selector, to_checksum_address

from deployments.models import NetworkDeployment
from estate_adapter.encoding import to_hex

from .models import FulfillmentPayload


class FulfillmentError(ValueError):
    """Raised when a fulfillment call cannot be built."""


FULFILLMENT_SIGNATURE = "handleOracleFulfillment(bytes32,bytes,bytes)"
FULFILLMENT_ARG_TYPES = ["bytes32", "bytes", "bytes"]
FULFILLMENT_SELECTOR = function_signature_to_4byte_selector(FULFILLMENT_SIGNATURE)


def build_fulfillment_payload(
    deployment: NetworkDeployment,
    request_id: Union[bytes, str],
    response: bytes,
    err: bytes = b"",
) -> FulfillmentPayload:
    request_bytes = parse_request_id(request_id)
    if not isinstance(response, (bytes, bytearray)) or not isinstance(err, (bytes, bytearray)):
        raise FulfillmentError("Response and error must be bytes.")

    calldata = FULFILLMENT_SELECTOR + encode(
        FULFILLMENT_ARG_TYPES, [request_bytes, bytes(response), bytes(err)]
    )
    return FulfillmentPayload(
        chain_id=deployment.chain_id,
        to_address=to_checksum_address(deployment.estate_verification),
        data=to_hex(calldata),
        value_wei=0,
    )


def parse_request_id(request_id: Union[bytes, str]) -> bytes:
    if isinstance(request_id, (bytes, bytearray)):
        value = bytes(request_id)
    elif isinstance(request_id, str):
        text = request_id.strip()
        if text[:2].lower() == "0x":
            text = text[2:]
        try:
            value = bytes.fromhex(text)
        except ValueError as exc:
            raise FulfillmentError("Request id must be hex encoded.") from exc
    else:
        raise FulfillmentError("Request id must be bytes or a hex string.")

    if len(value) != 32:
        raise FulfillmentError("Request id must be exactly 32 bytes.")
    return value
