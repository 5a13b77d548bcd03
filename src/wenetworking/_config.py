from typing import Optional

from pydantic import BaseModel, Field

from ._utils.constants import DEFAULT_TIMEOUT


class Config(BaseModel):
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    max_workers: Optional[int] = Field(default=None, ge=1)
    strict_decoding: bool = False
    default_headers: dict[str, str] = Field(default_factory=dict)
    debug: bool = False
