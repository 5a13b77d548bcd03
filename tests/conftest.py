import sys
from pathlib import Path
from typing import Generator

import pytest

# Ensure local source package (src/wenetworking) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from wenetworking import Config, RequestExecutor, RequestSpec  # noqa: E402


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "WENETWORKING_TIMEOUT",
        "WENETWORKING_MAX_WORKERS",
        "WENETWORKING_STRICT_DECODING",
        "WENETWORKING_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def host() -> str:
    return "https://api.example.com"


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def spec(host: str) -> RequestSpec:
    return RequestSpec(host=host, endpoint="/todos")


@pytest.fixture
def executor(config: Config) -> Generator[RequestExecutor, None, None]:
    executor = RequestExecutor(config)
    yield executor
    executor.close()
