"""Tests for the server entry point."""

from __future__ import annotations

from typing import Any, Dict

import pytest

import run


@pytest.fixture
def captured(monkeypatch: pytest.MonkeyPatch) -> Dict[str, Any]:
    calls: Dict[str, Any] = {}

    def fake_run(target: str, **kwargs: Any) -> None:
        calls["target"] = target
        calls.update(kwargs)

    monkeypatch.setattr(run.uvicorn, "run", fake_run)
    return calls


def test_reload_is_a_plain_flag() -> None:
    args = run._build_parser().parse_args(["--reload", "--port", "8000"])

    assert args.reload is True
    assert args.port == 8000


def test_reload_does_not_consume_following_token() -> None:
    with pytest.raises(SystemExit):
        run._build_parser().parse_args(["--reload", "false"])


def test_main_starts_uvicorn(captured: Dict[str, Any]) -> None:
    assert run.main(["--port", "8123", "--host", "127.0.0.1"]) == 0
    assert captured == {
        "target": "pms.api.main:app",
        "host": "127.0.0.1",
        "port": 8123,
        "reload": False,
    }


def test_main_enables_reload(captured: Dict[str, Any]) -> None:
    assert run.main(["--reload"]) == 0
    assert captured["reload"] is True


def test_main_rejects_invalid_port(captured: Dict[str, Any]) -> None:
    assert run.main(["--port", "abc"]) == 1
    assert captured == {}


def test_main_rejects_unknown_options(captured: Dict[str, Any]) -> None:
    assert run.main(["--workers", "4"]) == 1
    assert captured == {}
