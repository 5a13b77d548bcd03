from ._logs import log_request, log_response, setup_logging
from ._request_builder import BuiltRequest, build_request, build_url, serialize_body
from ._request_spec import RequestSpec
from ._response_decoder import decode_response, type_adapter

__all__ = [
    "BuiltRequest",
    "RequestSpec",
    "build_request",
    "build_url",
    "decode_response",
    "log_request",
    "log_response",
    "serialize_body",
    "setup_logging",
    "type_adapter",
]
