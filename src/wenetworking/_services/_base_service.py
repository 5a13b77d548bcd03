from logging import getLogger
from typing import Optional

from httpx import AsyncClient, Client, Headers, Response, Timeout

from .._config import Config
from .._utils import BuiltRequest, log_request
from .._utils.constants import LOGGER_NAME


class BaseService:
    """Owns the HTTP clients shared by every request of a service.

    One synchronous and one asynchronous ``httpx`` client are created per
    service instance, with the configured timeout and default headers, and
    reused for all calls. Either may be injected, which is how tests replace
    the transport.
    """

    def __init__(
        self,
        config: Config,
        *,
        client: Optional[Client] = None,
        async_client: Optional[AsyncClient] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config

        client_kwargs = {
            "timeout": Timeout(self._config.timeout),
            "headers": Headers(self.default_headers),
        }

        self._client = client if client is not None else Client(**client_kwargs)
        self._client_async = (
            async_client if async_client is not None else AsyncClient(**client_kwargs)
        )

        self._logger.debug(f"HEADERS: {self.default_headers}")

        super().__init__()

    def request(self, request: BuiltRequest) -> Response:
        """Send a built request and return the response.

        Status codes are not checked here; the caller classifies them.

        Raises:
            httpx.HTTPError: When the transport fails before a response is received.
        """
        log_request(
            request.method.value, str(request.url), request.headers, request.content
        )

        return self._client.request(
            request.method.value,
            request.url,
            headers=request.headers,
            content=request.content,
        )

    async def request_async(self, request: BuiltRequest) -> Response:
        log_request(
            request.method.value, str(request.url), request.headers, request.content
        )

        return await self._client_async.request(
            request.method.value,
            request.url,
            headers=request.headers,
            content=request.content,
        )

    @property
    def default_headers(self) -> dict[str, str]:
        return dict(self._config.default_headers)
