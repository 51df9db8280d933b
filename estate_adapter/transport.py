"""Single-shot JSON over HTTP for the estate backend."""

from dataclasses import dataclass
import http.client
import json
import logging
from typing import Any, Dict, Optional, Protocol
import urllib.error
import urllib.request

from .errors import MalformedResponse, RequestFailure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    status: int
    data: Any
    error: bool = False
    message: str = ""


class Fetcher(Protocol):
    def get(self, url: str, headers: Dict[str, str], timeout_s: float) -> HttpResponse:
        ...


class UrllibFetcher:
    """GET a JSON document with a bounded timeout and no retries.

    Non-2xx statuses come back as an ``HttpResponse`` with ``error`` set so the
    caller decides how to fail. Transport problems raise ``RequestFailure``.
    """

    def get(self, url: str, headers: Dict[str, str], timeout_s: float) -> HttpResponse:
        request = urllib.request.Request(
            url,
            headers={"Accept": "application/json", **headers},
            method="GET",
        )

        try:
            with urllib.request.urlopen(request, timeout=timeout_s) as response:
                status = response.status
                raw = response.read()
        except urllib.error.HTTPError as exc:
            logger.info("Estate backend returned HTTP %s for %s", exc.code, url)
            return HttpResponse(
                status=exc.code,
                data=_try_parse(exc),
                error=True,
                message=f"HTTP {exc.code}: {exc.reason}",
            )
        except (urllib.error.URLError, OSError, http.client.HTTPException) as exc:
            raise RequestFailure(f"Request to estate backend failed: {exc}") from exc

        if not 200 <= status < 300:
            return HttpResponse(status=status, data=None, error=True, message=f"HTTP {status}")

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise MalformedResponse("Estate backend returned invalid JSON.") from exc

        return HttpResponse(status=status, data=data)


def _try_parse(exc: urllib.error.HTTPError) -> Optional[Any]:
    try:
        raw = exc.read()
    except (OSError, http.client.HTTPException):
        return None
    if not raw:
        return None
    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None
