from ._config import Config
from ._services import RequestExecutor
from ._utils import BuiltRequest, RequestSpec, build_request
from ._wenetworking import WENetworking
from .models import (
    EmptySuccess,
    Failure,
    HttpMethod,
    NetworkingError,
    Outcome,
    Success,
)

__all__ = [
    "BuiltRequest",
    "Config",
    "EmptySuccess",
    "Failure",
    "HttpMethod",
    "NetworkingError",
    "Outcome",
    "RequestExecutor",
    "RequestSpec",
    "Success",
    "WENetworking",
    "build_request",
]
