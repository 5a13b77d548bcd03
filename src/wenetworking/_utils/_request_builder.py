import json
from dataclasses import dataclass
from logging import getLogger
from typing import Any, Mapping, Optional, Union

import httpx
from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from ..models.errors import NetworkingError
from ..models.http_method import HttpMethod
from ._request_spec import RequestSpec
from .constants import LOGGER_NAME

logger = getLogger(LOGGER_NAME)


@dataclass(frozen=True)
class BuiltRequest:
    """A transport-ready request produced by :func:`build_request`."""

    method: HttpMethod
    url: httpx.URL
    headers: dict[str, str]
    content: Optional[bytes] = None


def build_url(
    host: str, endpoint: str, query_parameters: Mapping[str, str]
) -> httpx.URL:
    """Join host and endpoint and append the query items.

    Raises:
        NetworkingError: code -1 when the result is not an absolute URL.
    """
    try:
        url = httpx.URL(host + endpoint)
    except httpx.InvalidURL as e:
        raise NetworkingError.request_not_created() from e

    if not url.is_absolute_url or not url.host:
        raise NetworkingError.request_not_created()

    if query_parameters:
        params = url.params
        for key, value in query_parameters.items():
            params = params.add(key, value)
        url = url.copy_with(params=params)

    return url


def serialize_body(
    body_parameters: Union[Mapping[str, Any], BaseModel],
) -> Optional[bytes]:
    """Serialize the body parameters to JSON bytes.

    Returns None for an empty mapping, and also when the values cannot be
    serialized: the request then goes out without a body.
    """
    if not isinstance(body_parameters, BaseModel) and not body_parameters:
        return None

    try:
        if isinstance(body_parameters, BaseModel):
            payload = body_parameters.model_dump(mode="json", by_alias=True)
        else:
            payload = dict(body_parameters)
        if not payload:
            return None
        return json.dumps(payload, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError, PydanticSerializationError) as e:
        logger.warning(f"Body parameters could not be serialized, sending no body: {e}")
        return None


def build_request(spec: RequestSpec) -> BuiltRequest:
    """Turn a :class:`RequestSpec` into a :class:`BuiltRequest`.

    Args:
        spec: The request description.

    Returns:
        BuiltRequest: URL with query string, method, caller headers and the
        optional JSON body.

    Raises:
        NetworkingError: code -1 when ``host + endpoint`` is not a valid
        absolute URL. This is the only failure; an unserializable body
        degrades to no body.
    """
    url = build_url(spec.host, spec.endpoint, spec.query_parameters)

    return BuiltRequest(
        method=spec.method,
        url=url,
        headers=dict(spec.headers),
        content=serialize_body(spec.body_parameters),
    )
