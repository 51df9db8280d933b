"""Typed parse step for the estate backend's user document."""

import re
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError, field_validator

from .errors import MalformedResponse
from .models import UINT256_MAX, EstateRecord

_DECIMAL_INT = re.compile(r"[0-9]+")
_HEX_INT = re.compile(r"0[xX][0-9a-fA-F]+")
_HEX_BYTES = re.compile(r"(?:[0-9a-fA-F]{2})*")


class EstateUser(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    current_estate_cost: int = Field(..., alias="currentEstateCost")
    percentage_to_tokenize: int = Field(..., alias="percentageToTokenize")
    is_verified: StrictBool = Field(..., alias="isVerified")
    salt_hex: StrictStr = Field(..., alias="_id")

    @field_validator("current_estate_cost", "percentage_to_tokenize", mode="before")
    @classmethod
    def coerce_amounts(cls, value: Any) -> int:
        return coerce_uint256(value)

    @field_validator("salt_hex")
    @classmethod
    def check_salt_hex(cls, value: str) -> str:
        if not _HEX_BYTES.fullmatch(value):
            raise ValueError("must be an even-length hexadecimal string")
        return value


class EstateUserData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    user: EstateUser


class EstateResponseBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: EstateUserData


def coerce_uint256(value: Any) -> int:
    """Coerce a JSON scalar to an unsigned 256-bit integer.

    Accepts integers, integral floats, decimal strings and ``0x`` hex strings.
    """
    if isinstance(value, bool):
        raise ValueError("must be a number, not a boolean")

    if isinstance(value, int):
        result = value
    elif isinstance(value, float):
        if not value.is_integer():
            raise ValueError("must be an integer")
        result = int(value)
    elif isinstance(value, str):
        text = value.strip()
        if _HEX_INT.fullmatch(text):
            result = int(text, 16)
        elif _DECIMAL_INT.fullmatch(text):
            result = int(text, 10)
        else:
            raise ValueError(f"not an integer string: {value!r}")
    else:
        raise ValueError(f"unsupported type {type(value).__name__}")

    if result < 0:
        raise ValueError("must be non-negative")
    if result > UINT256_MAX:
        raise ValueError("exceeds uint256 range")
    return result


def parse_estate_response(body: Any, verifying_operator: str) -> EstateRecord:
    try:
        parsed = EstateResponseBody.model_validate(body)
    except ValidationError as exc:
        raise MalformedResponse(_describe(exc)) from exc

    user = parsed.data.user
    return EstateRecord(
        estate_cost=user.current_estate_cost,
        percentage_to_tokenize=user.percentage_to_tokenize,
        is_approved=user.is_verified,
        salt_bytes=bytes.fromhex(user.salt_hex),
        verifying_operator=verifying_operator,
    )


def _describe(exc: ValidationError) -> str:
    problems: List[str] = []
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"]) or "<body>"
        problems.append(f"{path}: {error['msg']}")
    return "Malformed estate response: " + "; ".join(problems)
