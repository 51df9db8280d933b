"""Canonical ABI tuple codec for estate verification payloads."""

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError
from eth_utils import is_address, to_checksum_address

from .models import ESTATE_PAYLOAD_TYPES, UINT256_MAX, EstateRecord


class PayloadDecodeError(ValueError):
    """Raised when bytes do not decode as an estate payload."""


def encode_estate_record(record: EstateRecord) -> bytes:
    _validate_record(record)
    values = list(record.as_abi_values())
    values[3] = bytes(values[3])
    values[4] = to_checksum_address(values[4])
    return encode(list(ESTATE_PAYLOAD_TYPES), values)


def decode_estate_payload(data: bytes) -> EstateRecord:
    try:
        estate_cost, percentage, is_approved, salt, operator = decode(
            list(ESTATE_PAYLOAD_TYPES), bytes(data)
        )
    except (DecodingError, TypeError) as exc:
        raise PayloadDecodeError(f"Payload is not a valid estate encoding: {exc}") from exc

    return EstateRecord(
        estate_cost=estate_cost,
        percentage_to_tokenize=percentage,
        is_approved=is_approved,
        salt_bytes=salt,
        verifying_operator=to_checksum_address(operator),
    )


def payload_from_hex(value: str) -> bytes:
    text = value.strip()
    if text[:2].lower() == "0x":
        text = text[2:]
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise PayloadDecodeError("Payload must be hex encoded.") from exc


def to_hex(data: bytes) -> str:
    return "0x" + data.hex()


def _validate_record(record: EstateRecord) -> None:
    for name in ("estate_cost", "percentage_to_tokenize"):
        value = getattr(record, name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer.")
        if not 0 <= value <= UINT256_MAX:
            raise ValueError(f"{name} is outside the uint256 range.")
    if not isinstance(record.is_approved, bool):
        raise ValueError("is_approved must be a boolean.")
    if not isinstance(record.salt_bytes, (bytes, bytearray)):
        raise ValueError("salt_bytes must be bytes.")
    if not isinstance(record.verifying_operator, str) or not is_address(record.verifying_operator):
        raise ValueError(f"Invalid verifying operator address: {record.verifying_operator!r}")
