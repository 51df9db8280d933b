from .builder import FULFILLMENT_SIGNATURE, FulfillmentError, build_fulfillment_payload
from .models import DryRunResult, FulfillmentPayload
from .simulator import SimulationError, simulate

__all__ = [
    "DryRunResult",
    "FULFILLMENT_SIGNATURE",
    "FulfillmentError",
    "FulfillmentPayload",
    "SimulationError",
    "build_fulfillment_payload",
    "simulate",
]
