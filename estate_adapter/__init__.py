from .adapter import EstateDataAdapter
from .config import PLACEHOLDER_VERIFYING_OPERATOR, AdapterConfig
from .encoding import PayloadDecodeError, decode_estate_payload, encode_estate_record
from .errors import EstateAdapterError, MalformedResponse, RequestFailure
from .models import ESTATE_PAYLOAD_TYPES, EstateRecord
from .schema import parse_estate_response
from .transport import Fetcher, HttpResponse, UrllibFetcher

__all__ = [
    "AdapterConfig",
    "ESTATE_PAYLOAD_TYPES",
    "EstateAdapterError",
    "EstateDataAdapter",
    "EstateRecord",
    "Fetcher",
    "HttpResponse",
    "MalformedResponse",
    "PLACEHOLDER_VERIFYING_OPERATOR",
    "PayloadDecodeError",
    "RequestFailure",
    "UrllibFetcher",
    "decode_estate_payload",
    "encode_estate_record",
    "parse_estate_response",
]
