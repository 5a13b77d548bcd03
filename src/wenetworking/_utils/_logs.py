import json
import logging
import sys
from typing import Any, Optional

from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError

from .constants import LOGGER_NAME, NO_BODY, NO_HEADERS, NO_PARSABLE_RESPONSE

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(debug: bool = False) -> None:
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if any(getattr(h, "_wenetworking", False) for h in logger.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s: %(message)s"))
    handler._wenetworking = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


def log_request(
    method: str, url: str, headers: dict[str, str], content: Optional[bytes]
) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return

    logger.debug(f"[{method}]: {url}")
    logger.debug(headers if headers else NO_HEADERS)

    body: Any = NO_BODY
    if content:
        try:
            body = json.loads(content)
        except ValueError:
            body = NO_BODY
    logger.debug(body)


def log_response(value: Any) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return

    logger.debug(pretty_json(value) if value is not None else NO_PARSABLE_RESPONSE)


def pretty_json(value: Any) -> str:
    """Render a decoded value as indented JSON; pydantic models are dumped first."""
    try:
        return TypeAdapter(Any).dump_json(value, indent=2).decode("utf-8")
    except PydanticSerializationError:
        return repr(value)
