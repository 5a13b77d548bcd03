from ._base_service import BaseService
from .request_executor import RequestExecutor

__all__ = [
    "BaseService",
    "RequestExecutor",
]
