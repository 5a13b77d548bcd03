import threading
from os import environ as env
from typing import Any, Callable, Optional, TypeVar

from dotenv import load_dotenv
from httpx import AsyncClient, Client

from ._config import Config
from ._services import RequestExecutor
from ._utils import RequestSpec, setup_logging
from ._utils.constants import (
    ENV_DEBUG,
    ENV_MAX_WORKERS,
    ENV_STRICT_DECODING,
    ENV_TIMEOUT,
)
from .models import NetworkingError, Outcome

load_dotenv()

T = TypeVar("T")


class WENetworking:
    """Entry point holding the request executor shared by the whole process.

    Create it once, at start-up, and pass it to whatever needs to talk HTTP.
    The executor and its HTTP clients are created on first use and reused
    for every request afterwards.
    """

    def __init__(
        self,
        *,
        timeout: Optional[float] = None,
        max_workers: Optional[int] = None,
        strict_decoding: Optional[bool] = None,
        default_headers: Optional[dict[str, str]] = None,
        debug: Optional[bool] = None,
        client: Optional[Client] = None,
        async_client: Optional[AsyncClient] = None,
    ) -> None:
        """
        Initialize the networking layer.

        Args:
            timeout (Optional[float]): Seconds allowed per request. Falls back to
                `WENETWORKING_TIMEOUT`, then to 40 seconds.
            max_workers (Optional[int]): Worker threads running callback requests.
                Falls back to `WENETWORKING_MAX_WORKERS`.
            strict_decoding (Optional[bool]): Report undecodable payloads as failures
                instead of successes without a value. Falls back to
                `WENETWORKING_STRICT_DECODING`.
            default_headers (Optional[dict[str, str]]): Headers sent with every request.
            debug (Optional[bool]): Enable debug logging. Falls back to `WENETWORKING_DEBUG`.
            client (Optional[Client]): Use this client instead of creating one.
            async_client (Optional[AsyncClient]): Use this async client instead of creating one.
        """
        values: dict[str, Any] = {
            "timeout": timeout if timeout is not None else env.get(ENV_TIMEOUT),
            "max_workers": (
                max_workers if max_workers is not None else env.get(ENV_MAX_WORKERS)
            ),
            "strict_decoding": (
                strict_decoding
                if strict_decoding is not None
                else env.get(ENV_STRICT_DECODING)
            ),
            "default_headers": default_headers,
            "debug": debug if debug is not None else env.get(ENV_DEBUG),
        }

        # unset values keep the Config defaults
        self._config = Config(**{k: v for k, v in values.items() if v is not None})
        self._client = client
        self._async_client = async_client
        self._executor: Optional[RequestExecutor] = None
        self._executor_lock = threading.Lock()

        setup_logging(self._config.debug)

    @property
    def executor(self) -> RequestExecutor:
        with self._executor_lock:
            if self._executor is None:
                self._executor = RequestExecutor(
                    self._config, client=self._client, async_client=self._async_client
                )
            return self._executor

    def execute(
        self,
        spec: RequestSpec,
        result_type: type[T],
        on_success: Callable[[Optional[T]], Any],
        on_failure: Callable[[NetworkingError], Any],
    ) -> None:
        self.executor.execute(spec, result_type, on_success, on_failure)

    def execute_empty(
        self,
        spec: RequestSpec,
        on_success: Callable[[], Any],
        on_failure: Callable[[NetworkingError], Any],
    ) -> None:
        self.executor.execute_empty(spec, on_success, on_failure)

    async def execute_async(
        self, spec: RequestSpec, result_type: type[T]
    ) -> Outcome[T]:
        return await self.executor.execute_async(spec, result_type)

    async def execute_empty_async(self, spec: RequestSpec) -> Outcome[Any]:
        return await self.executor.execute_empty_async(spec)

    def close(self) -> None:
        if self._executor is not None:
            self._executor.close()

    async def aclose(self) -> None:
        if self._executor is not None:
            await self._executor.aclose()
