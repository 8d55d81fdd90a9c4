"""Tests for the demo runner and the `python -m showcase` entry point."""

import json
import urllib.error
import urllib.request
from email.message import Message

import pytest

from showcase.__main__ import main
from showcase.catalog import DemoEntry, load_catalog, select
from showcase.config import Settings
from showcase.runner import run_demos


@pytest.fixture(autouse=True)
def _fast_settings(monkeypatch):
    monkeypatch.setenv("SHOWCASE_DELAY_MS", "0")
    monkeypatch.setenv("SHOWCASE_API_BASE_URL", "http://api.test")


@pytest.fixture
def offline(monkeypatch):
    def fake_urlopen(req, timeout):
        raise urllib.error.URLError("connection refused")

    monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)


@pytest.fixture
def online(monkeypatch):
    payloads = {
        "http://api.test/data": {"source": "data", "items": [1, 2, 3, 4, 5], "total": 15},
        "http://api.test/data1": {"source": "data1", "items": [2, 4, 6], "total": 12},
        "http://api.test/data2": {"source": "data2", "items": [1, 3, 5], "total": 9},
    }

    class _JsonResponse:
        status = 200

        def __init__(self, body: bytes) -> None:
            self.headers = Message()
            self.headers["Content-Type"] = "application/json"
            self._body = body

        def read(self) -> bytes:
            return self._body

        def __enter__(self):
            return self

        def __exit__(self, *exc):
            return False

    def fake_urlopen(req, timeout):
        return _JsonResponse(json.dumps(payloads[req.full_url]).encode())

    monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)
    return payloads


def test_list(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "person\tClass with a method" in out
    assert "custom-event" in out


def test_unknown_id_exits_2(capsys):
    assert main(["nope"]) == 2
    assert "nope" in capsys.readouterr().err


def test_selected_demos_print_expected_lines(capsys):
    ids = [
        "person",
        "counter",
        "delay",
        "higher-order",
        "spread",
        "nested-destructuring",
        "factorial",
        "custom-iterator",
        "modules",
        "custom-event",
    ]
    assert main(ids) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "== 1. person: Class with a method =="
    assert "Hi, my name is John Doe and I'm 30 years old." in lines
    assert "Current count: 0" in lines
    assert "Current count: 1" in lines
    assert "Data fetched successfully!" in lines
    assert "120" in lines
    assert "New York" in lines
    assert "[3, 4, 5]" in lines
    assert "Hello world!" in lines
    iterator_start = lines.index("== 8. custom-iterator: Restartable range iterator ==")
    assert lines[iterator_start + 1 : iterator_start + 6] == ["1", "2", "3", "4", "5"]


def test_all_synchronous_demos_succeed(capsys):
    entries = [
        e for e in load_catalog() if e.id not in {"delay", "get-data", "batch-fetch"}
    ]
    assert run_demos(entries, Settings(delay_ms=0)) == []
    out = capsys.readouterr().out
    assert "Button clicked!" in out
    assert "It is not hot outside" in out
    assert "{'name': 'John Doe', 'age': 30}" in out


def test_get_data_failure_is_logged_not_fatal(offline, caplog):
    assert main(["get-data"]) == 0
    assert "Error fetching data" in caplog.text


def test_batch_fetch_failure_marks_run_failed(offline, caplog):
    assert main(["batch-fetch", "factorial"]) == 1
    assert "Demo batch-fetch failed" in caplog.text


def test_run_demos_continues_after_failure(capsys):
    entries = select(load_catalog(), ["factorial"])
    broken = DemoEntry(id="broken", title="Broken", entry="showcase.demos:demo_missing")
    failed = run_demos([broken, *entries], Settings())
    assert failed == ["broken"]
    assert "120" in capsys.readouterr().out.splitlines()


def test_fetch_demos_print_decoded_payloads(online, capsys):
    assert main(["get-data", "batch-fetch"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "== 1. get-data: Guarded fetch with error logging ==",
        str(online["http://api.test/data"]),
        "== 2. batch-fetch: Concurrent fetch with gather ==",
        str([online["http://api.test/data1"], online["http://api.test/data2"]]),
    ]


def test_invalid_log_level_exits_2(monkeypatch, capsys):
    monkeypatch.setenv("SHOWCASE_LOG_LEVEL", "BASIC_FORMAT")
    assert main(["factorial"]) == 2
    assert "SHOWCASE_LOG_LEVEL" in capsys.readouterr().err
