"""Local-first FastAPI shell for the estate verification adapter."""

from __future__ import annotations

from dataclasses import asdict
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from deployments.registry import UnknownNetworkError, get_deployment, list_deployments
from estate_adapter.adapter import EstateDataAdapter
from estate_adapter.config import AdapterConfig
from estate_adapter.encoding import (
    PayloadDecodeError,
    decode_estate_payload,
    encode_estate_record,
    payload_from_hex,
    to_hex,
)
from estate_adapter.errors import MalformedResponse, RequestFailure
from fulfillment.builder import FulfillmentError, build_fulfillment_payload
from fulfillment.simulator import SimulationError, simulate

logger = logging.getLogger(__name__)

app = FastAPI(title="Estate Adapter", description="Local-first estate payload shell")

_ADAPTER: Optional[EstateDataAdapter] = None


class DecodeRequest(BaseModel):
    payload: str


class FulfillmentRequest(BaseModel):
    network: str
    request_id: str
    payload: str
    error: str = ""


@app.middleware("http")
async def _local_only(request: Request, call_next):
    client = request.client
    if client is not None:
        host = client.host
        if host not in {"127.0.0.1", "::1", "testclient"}:
            return JSONResponse({"error": "Remote access disabled."}, status_code=403)
    return await call_next(request)


def _error_handler(status_code: int):
    async def handler(request: Request, exc: Exception):
        logger.info("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse({"error": str(exc)}, status_code=status_code)

    return handler


for _exc_class, _status in (
    (RequestFailure, 502),
    (MalformedResponse, 422),
    (UnknownNetworkError, 404),
    (PayloadDecodeError, 400),
    (FulfillmentError, 400),
    (SimulationError, 400),
    (ValueError, 400),
):
    app.add_exception_handler(_exc_class, _error_handler(_status))


@app.get("/api/health")
async def health():
    return {"status": "ok"}


@app.get("/api/estates/{user_id}/payload")
def estate_payload(user_id: str):
    adapter = _get_adapter()
    record = adapter.fetch_record(user_id)
    payload = encode_estate_record(record)
    return {"user_id": user_id, "record": record.to_dict(), "payload": to_hex(payload)}


@app.post("/api/payloads/decode")
async def decode_payload(payload: DecodeRequest):
    record = decode_estate_payload(payload_from_hex(payload.payload))
    return {"record": record.to_dict()}


@app.get("/api/deployments")
async def deployments():
    return {"deployments": [deployment.to_dict() for deployment in list_deployments()]}


@app.get("/api/deployments/{network}")
async def deployment(network: str):
    return get_deployment(network).to_dict()


@app.post("/api/fulfillment")
async def fulfillment(payload: FulfillmentRequest):
    deployment_entry = get_deployment(payload.network)
    built = build_fulfillment_payload(
        deployment_entry,
        payload.request_id,
        payload_from_hex(payload.payload),
        err=payload.error.encode("utf-8"),
    )
    dry_run = simulate(built)
    return {"payload": asdict(built), "dry_run": dry_run.to_dict()}


def _get_adapter() -> EstateDataAdapter:
    global _ADAPTER
    if _ADAPTER is None:
        _ADAPTER = EstateDataAdapter(AdapterConfig.from_env())
    return _ADAPTER


def _set_adapter(adapter: Optional[EstateDataAdapter]) -> None:
    global _ADAPTER
    _ADAPTER = adapter


def _reset_state() -> None:
    _set_adapter(None)
