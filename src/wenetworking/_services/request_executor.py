from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Optional, TypeVar

from httpx import AsyncClient, Client, HTTPError, Response

from .._config import Config
from .._utils import (
    RequestSpec,
    build_request,
    decode_response,
    log_response,
    type_adapter,
)
from ..models.errors import NetworkingError
from ..models.outcome import EmptySuccess, Failure, Outcome, Success
from ._base_service import BaseService

T = TypeVar("T")


class RequestExecutor(BaseService):
    """Sends :class:`RequestSpec` requests and classifies their outcome.

    Two call shapes are offered, each as a callback form and an awaitable
    form:

    - typed: the JSON payload is decoded into a caller supplied type;
    - empty: only the HTTP status is looked at, 200 being the success.

    The callback forms return immediately and run the request on a worker
    thread owned by the executor. Exactly one of ``on_success`` and
    ``on_failure`` is invoked, once, on that worker thread.
    """

    def __init__(
        self,
        config: Config,
        *,
        client: Optional[Client] = None,
        async_client: Optional[AsyncClient] = None,
    ) -> None:
        super().__init__(config, client=client, async_client=async_client)
        self._pool = ThreadPoolExecutor(
            max_workers=self._config.max_workers,
            thread_name_prefix="wenetworking",
        )

    def execute(
        self,
        spec: RequestSpec,
        result_type: type[T],
        on_success: Callable[[Optional[T]], Any],
        on_failure: Callable[[NetworkingError], Any],
    ) -> None:
        """Send a request whose JSON response is decoded into ``result_type``.

        Args:
            spec (RequestSpec): The request to send.
            result_type: Anything pydantic can validate into, e.g. a model or ``list[Model]``.
            on_success: Called with the decoded value, or None when the payload did not decode.
            on_failure: Called with the :class:`NetworkingError` describing the failure.

        Examples:
            ```python
            from wenetworking import RequestSpec, WENetworking

            networking = WENetworking()

            networking.execute(
                RequestSpec(host="https://api.example.com", endpoint="/todos"),
                list[Todo],
                on_success=lambda todos: print(todos),
                on_failure=lambda error: print(error.code, error.message),
            )
            ```
        """
        # surface unsupported result types on the calling thread
        type_adapter(result_type)
        self._pool.submit(
            self._complete,
            lambda: self._perform(spec, result_type),
            on_success,
            on_failure,
        )

    def execute_empty(
        self,
        spec: RequestSpec,
        on_success: Callable[[], Any],
        on_failure: Callable[[NetworkingError], Any],
    ) -> None:
        """Send a request that carries no response payload.

        ``on_success`` is called when the server answers with HTTP 200; any
        other status is reported to ``on_failure`` with the status as code.
        """
        self._pool.submit(
            self._complete, lambda: self._perform_empty(spec), on_success, on_failure
        )

    async def execute_async(
        self, spec: RequestSpec, result_type: type[T]
    ) -> Outcome[T]:
        """Awaitable form of :meth:`execute`. Returns a ``Success`` or a ``Failure``."""
        type_adapter(result_type)
        try:
            request = build_request(spec)
        except NetworkingError as e:
            return Failure(e)

        try:
            response = await self.request_async(request)
        except HTTPError as e:
            return Failure(NetworkingError.from_transport_error(e))

        return self._classify(response, result_type)

    async def execute_empty_async(self, spec: RequestSpec) -> Outcome[Any]:
        """Awaitable form of :meth:`execute_empty`. Returns ``EmptySuccess`` or ``Failure``."""
        try:
            request = build_request(spec)
        except NetworkingError as e:
            return Failure(e)

        try:
            response = await self.request_async(request)
        except HTTPError as e:
            return Failure(NetworkingError.from_transport_error(e))

        return self._classify_empty(response)

    def close(self) -> None:
        """Wait for the requests in flight, then release the synchronous client."""
        self._pool.shutdown(wait=True)
        self._client.close()

    async def aclose(self) -> None:
        await self._client_async.aclose()

    def __enter__(self) -> "RequestExecutor":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "RequestExecutor":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
        self.close()

    def _perform(self, spec: RequestSpec, result_type: type[T]) -> Outcome[T]:
        try:
            request = build_request(spec)
        except NetworkingError as e:
            return Failure(e)

        try:
            response = self.request(request)
        except HTTPError as e:
            return Failure(NetworkingError.from_transport_error(e))

        return self._classify(response, result_type)

    def _perform_empty(self, spec: RequestSpec) -> Outcome[Any]:
        try:
            request = build_request(spec)
        except NetworkingError as e:
            return Failure(e)

        try:
            response = self.request(request)
        except HTTPError as e:
            return Failure(NetworkingError.from_transport_error(e))

        return self._classify_empty(response)

    def _classify(self, response: Response, result_type: type[T]) -> Outcome[T]:
        # the status is not inspected for typed requests, only the payload
        if not response.content:
            return Failure(NetworkingError.data_not_received())

        try:
            value = decode_response(
                response.content, result_type, strict=self._config.strict_decoding
            )
        except NetworkingError as e:
            return Failure(e)

        log_response(value)
        return Success(value)

    def _classify_empty(self, response: Response) -> Outcome[Any]:
        status_code = getattr(response, "status_code", None)
        if not isinstance(status_code, int):
            return Failure(NetworkingError.response_not_received())

        if status_code != 200:
            return Failure(NetworkingError.unexpected_status(status_code))

        self._logger.info("REQUEST SUCCESS")
        return EmptySuccess()

    def _complete(
        self,
        perform: Callable[[], Outcome[Any]],
        on_success: Callable[..., Any],
        on_failure: Callable[[NetworkingError], Any],
    ) -> None:
        try:
            outcome = perform()
        except Exception as e:
            # nothing else reports errors raised on the worker thread
            self._logger.exception("Request failed unexpectedly")
            outcome = Failure(NetworkingError(-1, str(e) or type(e).__name__))

        try:
            if isinstance(outcome, Failure):
                on_failure(outcome.error)
            elif isinstance(outcome, Success):
                on_success(outcome.value)
            else:
                on_success()
        except Exception:
            self._logger.exception("Request completion handler raised")
