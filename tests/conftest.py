from __future__ import annotations

import pytest

from tests.helpers import RecordingHandler


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for key in (
        "DEEPSEEK_API_KEY",
        "DEEPSEEK_BASE_URL",
        "DEEPSEEK_TIMEOUT",
        "DEEPSEEK_MODEL",
        "DEEPSEEK_TEMPERATURE",
        "DEEPSEEK_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    # Keep a developer's local .env out of the tests.
    monkeypatch.chdir(tmp_path)
