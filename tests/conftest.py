from collections.abc import Iterator

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Leave loguru as the library configures it at import."""
    yield
    logger.remove()
    logger.disable("gerr")


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages emitted by the library."""
    messages: list[str] = []
    logger.enable("gerr")
    sink_id = logger.add(
        lambda msg: messages.append(msg.record["message"]), level="DEBUG"
    )
    yield messages
    logger.remove(sink_id)


@pytest.fixture
def fake_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pin settings so a local .env file can't leak into tests."""
    monkeypatch.setenv("GERR_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("GERR_FAKE_API_RAND_MAX", "3")
    monkeypatch.setenv("GERR_DEFAULT_EXIT_CODE", "-1")
