"""Smoke tests for the estate adapter web API."""

import unittest

try:
    from fastapi.testclient import TestClient
except ImportError:  # pragma: no cover - optional dependency
    TestClient = None

try:
    from web import app as web_app
except ImportError:  # pragma: no cover - optional dependency
    web_app = None
from estate_adapter.adapter import EstateDataAdapter
from estate_adapter.config import PLACEHOLDER_VERIFYING_OPERATOR, AdapterConfig
from estate_adapter.encoding import encode_estate_record, to_hex
from estate_adapter.errors import RequestFailure
from estate_adapter.models import EstateRecord
from estate_adapter.transport import HttpResponse


class ScriptedFetcher:
    def __init__(self, response=None, exc=None) -> None:
        self.response = response
        self.exc = exc

    def get(self, url, headers, timeout_s):
        if self.exc is not None:
            raise self.exc
        return self.response


def _user_body(**overrides):
    user = {
        "currentEstateCost": "1000",
        "percentageToTokenize": "25",
        "isVerified": False,
        "_id": "deadbeef",
    }
    user.update(overrides)
    return {"data": {"user": user}}


@unittest.skipIf(TestClient is None or web_app is None, "FastAPI not available")
class WebApiTests(unittest.TestCase):
    def setUp(self) -> None:
        web_app._reset_state()
        self.addCleanup(web_app._reset_state)
        self.client = TestClient(web_app.app)
        self.payload_hex = to_hex(
            encode_estate_record(
                EstateRecord(
                    estate_cost=1000,
                    percentage_to_tokenize=25,
                    is_approved=False,
                    salt_bytes=bytes.fromhex("deadbeef"),
                    verifying_operator=PLACEHOLDER_VERIFYING_OPERATOR,
                )
            )
        )

    def _use_fetcher(self, fetcher) -> None:
        adapter = EstateDataAdapter(AdapterConfig(api_key="k"), fetcher=fetcher)
        web_app._set_adapter(adapter)

    def test_health(self) -> None:
        response = self.client.get("/api/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})

    def test_estate_payload(self) -> None:
        self._use_fetcher(ScriptedFetcher(HttpResponse(status=200, data=_user_body())))

        response = self.client.get("/api/estates/user-1/payload")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["user_id"], "user-1")
        self.assertEqual(body["payload"], self.payload_hex)
        self.assertEqual(body["record"]["estate_cost"], "1000")

    def test_request_failure_maps_to_502(self) -> None:
        self._use_fetcher(ScriptedFetcher(exc=RequestFailure("connection refused")))
        response = self.client.get("/api/estates/user-1/payload")
        self.assertEqual(response.status_code, 502)
        self.assertIn("connection refused", response.json()["error"])

    def test_malformed_response_maps_to_422(self) -> None:
        self._use_fetcher(
            ScriptedFetcher(HttpResponse(status=200, data=_user_body(currentEstateCost="n/a")))
        )
        response = self.client.get("/api/estates/user-1/payload")
        self.assertEqual(response.status_code, 422)
        self.assertIn("currentEstateCost", response.json()["error"])

    def test_decode_payload(self) -> None:
        response = self.client.post("/api/payloads/decode", json={"payload": self.payload_hex})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["record"]["salt_bytes"], "0xdeadbeef")

        bad = self.client.post("/api/payloads/decode", json={"payload": "0x12"})
        self.assertEqual(bad.status_code, 400)

    def test_deployments(self) -> None:
        listing = self.client.get("/api/deployments")
        self.assertEqual(listing.status_code, 200)
        self.assertEqual(len(listing.json()["deployments"]), 2)

        fuji = self.client.get("/api/deployments/43113")
        self.assertEqual(fuji.status_code, 200)
        self.assertEqual(fuji.json()["name"], "fuji")

        missing = self.client.get("/api/deployments/mainnet")
        self.assertEqual(missing.status_code, 404)

    def test_fulfillment_dry_run(self) -> None:
        response = self.client.post(
            "/api/fulfillment",
            json={
                "network": "sepolia",
                "request_id": "0x" + "cd" * 32,
                "payload": self.payload_hex,
            },
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["payload"]["chain_id"], 11155111)
        self.assertTrue(body["dry_run"]["success"])


if __name__ == "__main__":
    unittest.main()
