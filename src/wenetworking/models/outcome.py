from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

from .errors import NetworkingError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Typed success. ``value`` is None when the payload did not decode."""

    value: Optional[T] = None


@dataclass(frozen=True)
class EmptySuccess:
    """The request completed with HTTP 200 and no payload was interpreted."""


@dataclass(frozen=True)
class Failure:
    error: NetworkingError

    @property
    def code(self) -> int:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message


Outcome = Union[Success[T], EmptySuccess, Failure]
