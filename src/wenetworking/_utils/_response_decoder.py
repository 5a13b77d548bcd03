from functools import lru_cache
from logging import getLogger
from typing import Any, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..models.errors import NetworkingError
from .constants import LOGGER_NAME

logger = getLogger(LOGGER_NAME)

T = TypeVar("T")


@lru_cache(maxsize=128)
def type_adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


def decode_response(
    content: bytes, result_type: type[T], *, strict: bool = False
) -> Optional[T]:
    """Decode a JSON payload into ``result_type``.

    This is the one place where a payload that does not match
    ``result_type`` is either tolerated or reported. With ``strict`` off the
    mismatch yields None and the caller still gets a success.

    Raises:
        NetworkingError: code -4, only when ``strict`` is True.
    """
    try:
        return type_adapter(result_type).validate_json(content)
    except ValidationError as e:
        if strict:
            raise NetworkingError.response_not_decoded(str(e)) from e
        type_name = getattr(result_type, "__name__", str(result_type))
        logger.warning(
            f"Response could not be decoded as {type_name}: {e.error_count()} error(s)"
        )
        return None
