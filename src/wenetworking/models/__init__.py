from .errors import (
    DATA_NOT_RECEIVED,
    REQUEST_NOT_CREATED,
    RESPONSE_NOT_DECODED,
    RESPONSE_NOT_RECEIVED,
    NetworkingError,
)
from .http_method import HttpMethod
from .outcome import EmptySuccess, Failure, Outcome, Success

__all__ = [
    "DATA_NOT_RECEIVED",
    "REQUEST_NOT_CREATED",
    "RESPONSE_NOT_DECODED",
    "RESPONSE_NOT_RECEIVED",
    "EmptySuccess",
    "Failure",
    "HttpMethod",
    "NetworkingError",
    "Outcome",
    "Success",
]
