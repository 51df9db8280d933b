"""Determinism and dry-run tests for oracle fulfillment payloads."""

import unittest
from dataclasses import replace

from eth_utils import function_signature_to_4byte_selector, to_checksum_address

from deployments.registry import get_deployment
from estate_adapter.config import PLACEHOLDER_VERIFYING_OPERATOR
from estate_adapter.encoding import encode_estate_record
from estate_adapter.models import EstateRecord
from fulfillment.builder import FulfillmentError, build_fulfillment_payload, parse_request_id
from fulfillment.simulator import SimulationError, simulate

REQUEST_ID = "0x" + "ab" * 32


class FulfillmentTests(unittest.TestCase):
    def setUp(self) -> None:
        self.deployment = get_deployment("fuji")
        self.record = EstateRecord(
            estate_cost=1000,
            percentage_to_tokenize=25,
            is_approved=False,
            salt_bytes=bytes.fromhex("deadbeef"),
            verifying_operator=PLACEHOLDER_VERIFYING_OPERATOR,
        )
        self.response = encode_estate_record(self.record)

    def test_payload_targets_estate_verification(self) -> None:
        payload = build_fulfillment_payload(self.deployment, REQUEST_ID, self.response)

        self.assertEqual(payload.chain_id, 43113)
        self.assertEqual(payload.to_address, to_checksum_address(self.deployment.estate_verification))
        self.assertEqual(payload.value_wei, 0)
        selector = function_signature_to_4byte_selector("handleOracleFulfillment(bytes32,bytes,bytes)")
        self.assertTrue(payload.data.startswith("0x" + selector.hex()))

    def test_deterministic_payloads(self) -> None:
        first = build_fulfillment_payload(self.deployment, REQUEST_ID, self.response)
        second = build_fulfillment_payload(self.deployment, bytes.fromhex("ab" * 32), self.response)
        self.assertEqual(first, second)

    def test_dry_run_recovers_record(self) -> None:
        payload = build_fulfillment_payload(self.deployment, REQUEST_ID, self.response)

        result = simulate(payload)

        self.assertTrue(result.success)
        self.assertEqual(result.request_id, REQUEST_ID)
        self.assertEqual(result.record, self.record)
        self.assertEqual(result.to_dict()["record"]["estate_cost"], "1000")

    def test_dry_run_reports_oracle_error(self) -> None:
        payload = build_fulfillment_payload(self.deployment, REQUEST_ID, b"", err=b"Request failed")

        result = simulate(payload)

        self.assertFalse(result.success)
        self.assertIsNone(result.record)
        self.assertEqual(result.error_message, "Request failed")

    def test_dry_run_flags_undecodable_response(self) -> None:
        payload = build_fulfillment_payload(self.deployment, REQUEST_ID, b"\x01\x02")

        result = simulate(payload)

        self.assertFalse(result.success)
        self.assertIn("not a valid estate encoding", result.error_message)

    def test_request_id_validation(self) -> None:
        self.assertEqual(parse_request_id(REQUEST_ID), bytes.fromhex("ab" * 32))
        for bad in ("0x1234", "zz" * 32, 42, b"\x00" * 31):
            with self.subTest(bad=bad):
                with self.assertRaises(FulfillmentError):
                    parse_request_id(bad)

    def test_simulate_rejects_structural_problems(self) -> None:
        payload = build_fulfillment_payload(self.deployment, REQUEST_ID, self.response)
        cases = (
            replace(payload, to_address=""),
            replace(payload, data=payload.data[2:]),
            replace(payload, value_wei=1),
            replace(payload, data="0xdeadbeef" + payload.data[10:]),
            replace(payload, data="0xzz"),
            replace(payload, data=payload.data[:74]),
        )
        for bad in cases:
            with self.subTest(bad=bad):
                with self.assertRaises(SimulationError):
                    simulate(bad)


if __name__ == "__main__":
    unittest.main()
