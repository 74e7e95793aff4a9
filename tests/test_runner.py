"""Tests for the sequential fetch -> extract -> write pipeline."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from page_notes import runner
from page_notes.config import AppConfig
from page_notes.core.errors import InputError
from page_notes.fetch.fetcher import FetchResult
from page_notes.output.renderer import FETCH_FAILED_PLACEHOLDER

PAGES = {
    "https://one.example.com/": "<h1>One</h1><p>First page body.</p>",
    "https://three.example.com/": "<p>Third page body.</p><script>hidden()</script>",
}


def _quiet_config() -> AppConfig:
    cfg = AppConfig()
    cfg.logging.console = False
    return cfg


def _quiet_console() -> Console:
    return Console(file=io.StringIO(), width=200)


def _fake_fetch(url, **kwargs):
    if url in PAGES:
        return FetchResult(url=url, status_code=200, text=PAGES[url], error=None)
    return FetchResult(url=url, status_code=404, text=None, error=f"HTTP 404 fetching {url}")


def test_failed_fetch_does_not_abort_or_reorder_records(tmp_path, monkeypatch):
    monkeypatch.setattr(runner, "fetch_url", _fake_fetch)
    urls = [
        "https://one.example.com/",
        "https://two.example.com/missing",
        "https://three.example.com/",
    ]

    saved = runner.run_pipeline(
        urls, tmp_path / "notes.md", _quiet_config(), show_progress=False, console=_quiet_console()
    )

    text = saved.read_text(encoding="utf-8")
    records = text.split("---\n")[1:]
    assert len(records) == 3
    assert records[0].startswith("Source: https://one.example.com/\n")
    assert "One\n\nFirst page body." in records[0]
    assert records[1].startswith("Source: https://two.example.com/missing\n")
    assert FETCH_FAILED_PLACEHOLDER in records[1]
    assert "Reason: HTTP 404 fetching https://two.example.com/missing" in records[1]
    assert records[2].startswith("Source: https://three.example.com/\n")
    assert "Third page body." in records[2]
    assert "hidden" not in text


def test_returns_absolute_path_and_prints_summary(tmp_path, monkeypatch):
    monkeypatch.setattr(runner, "fetch_url", _fake_fetch)
    monkeypatch.chdir(tmp_path)
    console = _quiet_console()

    saved = runner.run_pipeline(
        ["https://one.example.com/", "https://nope.example.com/"],
        Path("notes.md"),
        _quiet_config(),
        show_progress=False,
        console=console,
    )

    assert saved.is_absolute()
    assert saved == (tmp_path / "notes.md").resolve()
    summary = console.file.getvalue()
    assert "total=2" in summary
    assert "extracted=1" in summary
    assert "failed=1" in summary


def test_empty_page_is_written_with_placeholder(tmp_path, monkeypatch):
    def fake_fetch(url, **kwargs):
        return FetchResult(url=url, status_code=200, text="<div>no kept tags</div>", error=None)

    monkeypatch.setattr(runner, "fetch_url", fake_fetch)

    saved = runner.run_pipeline(
        ["https://empty.example.com/"],
        tmp_path / "notes.md",
        _quiet_config(),
        show_progress=False,
        console=_quiet_console(),
    )

    assert "Couldn't extract readable text." in saved.read_text(encoding="utf-8")


def test_fetch_settings_come_from_config(tmp_path, monkeypatch):
    calls = []

    def fake_fetch(url, **kwargs):
        calls.append((url, kwargs))
        return FetchResult(url=url, status_code=200, text="<p>ok</p>", error=None)

    monkeypatch.setattr(runner, "fetch_url", fake_fetch)
    cfg = _quiet_config()
    cfg.fetch.user_agent = "NotesBot/2.0"
    cfg.fetch.timeout_seconds = 12.0
    cfg.fetch.connect_timeout_seconds = 3.0

    runner.run_pipeline(
        ["https://a.example.com/", "https://a.example.com/"],
        tmp_path / "notes.md",
        cfg,
        show_progress=False,
        console=_quiet_console(),
    )

    assert [url for url, _ in calls] == ["https://a.example.com/", "https://a.example.com/"]
    _, kwargs = calls[0]
    assert kwargs["user_agent"] == "NotesBot/2.0"
    assert kwargs["timeout"] == 12.0
    assert kwargs["connect_timeout"] == 3.0


def test_records_written_before_unexpected_failure_survive(tmp_path, monkeypatch):
    def fake_fetch(url, **kwargs):
        if "boom" in url:
            raise RuntimeError("unexpected")
        return FetchResult(url=url, status_code=200, text="<p>kept</p>", error=None)

    monkeypatch.setattr(runner, "fetch_url", fake_fetch)
    output_path = tmp_path / "notes.md"

    with pytest.raises(RuntimeError):
        runner.run_pipeline(
            ["https://a.example.com/", "https://b.example.com/", "https://boom.example.com/"],
            output_path,
            _quiet_config(),
            show_progress=False,
            console=_quiet_console(),
        )

    text = output_path.read_text(encoding="utf-8")
    assert text.count("---\n") == 2
    assert "https://b.example.com/" in text


def test_unwritable_destination_is_fatal(tmp_path, monkeypatch):
    monkeypatch.setattr(runner, "fetch_url", _fake_fetch)

    with pytest.raises(OSError):
        runner.run_pipeline(
            ["https://one.example.com/"],
            tmp_path / "missing-dir" / "notes.md",
            _quiet_config(),
            show_progress=False,
            console=_quiet_console(),
        )


@pytest.mark.parametrize("urls", [[], ["https://a.example.com/", "   "]])
def test_invalid_url_list_is_rejected(tmp_path, urls):
    with pytest.raises(InputError):
        runner.run_pipeline(urls, tmp_path / "notes.md", _quiet_config(), show_progress=False)

    assert not (tmp_path / "notes.md").exists()


def test_progress_mode_writes_same_report(tmp_path, monkeypatch):
    monkeypatch.setattr(runner, "fetch_url", _fake_fetch)

    saved = runner.run_pipeline(
        ["https://one.example.com/"],
        tmp_path / "notes.md",
        _quiet_config(),
        show_progress=True,
        console=_quiet_console(),
    )

    assert "First page body." in saved.read_text(encoding="utf-8")


@pytest.mark.parametrize(
    ("error", "status_code", "expected"),
    [
        ("HTTP 404 fetching https://x", 404, "http_status"),
        ("ReadTimeout: timed out", None, "timeout"),
        ("ConnectTimeout: connect timeout", None, "timeout"),
        ("UnsupportedProtocol: missing scheme", None, "invalid_url"),
        ("ConnectError: connection refused", None, "network_failed"),
        ("RemoteProtocolError: peer closed", None, "unknown"),
        (None, None, "unknown"),
    ],
)
def test_categorize_error(error, status_code, expected):
    assert runner._categorize_error(error, status_code) == expected  # noqa: SLF001


def test_missing_destination_directory_is_not_created_by_file_logging(tmp_path, monkeypatch):
    monkeypatch.setattr(runner, "fetch_url", _fake_fetch)
    cfg = _quiet_config()
    cfg.logging.file = True

    with pytest.raises(OSError):
        runner.run_pipeline(
            ["https://one.example.com/"],
            tmp_path / "missing-dir" / "notes.md",
            cfg,
            show_progress=False,
            console=_quiet_console(),
        )

    assert not (tmp_path / "missing-dir").exists()
