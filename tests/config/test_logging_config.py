from __future__ import annotations

import logging

import pytest

from ontosearch.config import ConfigurationError, LoggingConfig, get_logging_config
from ontosearch.config import logging as logging_module


def test_default_level_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ONTOSEARCH_LOG_LEVEL", raising=False)

    assert get_logging_config() == LoggingConfig(level=logging.INFO)


def test_blank_value_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ONTOSEARCH_LOG_LEVEL", "   ")

    assert get_logging_config().level == logging.INFO


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("10", 10), (" error ", 40)],
)
def test_level_names_and_numbers(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int
) -> None:
    monkeypatch.setenv("ONTOSEARCH_LOG_LEVEL", raw)

    assert get_logging_config().level == expected


def test_invalid_level_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ONTOSEARCH_LOG_LEVEL", "chatty")

    with pytest.raises(ConfigurationError, match="ONTOSEARCH_LOG_LEVEL"):
        get_logging_config()


def test_configure_logging_forwards_level(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(logging_module.logging, "basicConfig", fake_basic_config)

    logging_module.configure_logging(level=logging.DEBUG, force=True)

    assert captured["level"] == logging.DEBUG
    assert captured["force"] is True
