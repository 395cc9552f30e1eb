from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from common.env import env_bool, env_choice, env_int


@pytest.fixture()
def restore_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    yield monkeypatch
    monkeypatch.undo()
    settings.reload_from_env()


def test_env_int(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PENDRAW_TEST_INT", raising=False)
    assert env_int("PENDRAW_TEST_INT", 7) == 7
    monkeypatch.setenv("PENDRAW_TEST_INT", " 12 ")
    assert env_int("PENDRAW_TEST_INT", 7) == 12
    monkeypatch.setenv("PENDRAW_TEST_INT", "-3")
    assert env_int("PENDRAW_TEST_INT", 7, min_value=0) == 0
    monkeypatch.setenv("PENDRAW_TEST_INT", "many")
    assert env_int("PENDRAW_TEST_INT", 7) == 7


@pytest.mark.parametrize(
    "raw,expected",
    [("1", True), ("0", False), ("yes", True), ("Off", False), ("TRUE", True), ("maybe", True)],
)
def test_env_bool(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("PENDRAW_TEST_BOOL", raw)
    # 不明値は既定 (True) にフォールバック
    assert env_bool("PENDRAW_TEST_BOOL", True) is expected


def test_env_choice(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PENDRAW_TEST_CHOICE", "debug")
    assert env_choice("PENDRAW_TEST_CHOICE", ("DEBUG", "INFO"), "INFO") == "DEBUG"
    monkeypatch.setenv("PENDRAW_TEST_CHOICE", "loud")
    assert env_choice("PENDRAW_TEST_CHOICE", ("DEBUG", "INFO"), "INFO") == "INFO"


def test_settings_defaults(restore_settings: pytest.MonkeyPatch) -> None:
    for name in (
        "PENDRAW_LOG_LEVEL",
        "PENDRAW_DEBUG_FRAMES",
        "PENDRAW_MSAA_SAMPLES",
        "PENDRAW_VSYNC",
        "PENDRAW_CAP_SEGMENTS",
    ):
        restore_settings.delenv(name, raising=False)
    settings.reload_from_env()
    s = settings.get()
    assert s.LOG_LEVEL == "INFO"
    assert s.DEBUG_FRAMES is False
    assert s.MSAA_SAMPLES == 4
    assert s.VSYNC is True
    assert s.CAP_SEGMENTS == 16


def test_settings_reload_from_env(restore_settings: pytest.MonkeyPatch) -> None:
    restore_settings.setenv("PENDRAW_LOG_LEVEL", "warning")
    restore_settings.setenv("PENDRAW_DEBUG_FRAMES", "1")
    restore_settings.setenv("PENDRAW_MSAA_SAMPLES", "-2")
    restore_settings.setenv("PENDRAW_VSYNC", "off")
    restore_settings.setenv("PENDRAW_CAP_SEGMENTS", "1")
    settings.reload_from_env()
    s = settings.get()
    assert s.LOG_LEVEL == "WARNING"
    assert s.DEBUG_FRAMES is True
    assert s.MSAA_SAMPLES == 0
    assert s.VSYNC is False
    assert s.CAP_SEGMENTS == 3
