import httpx
from typer.testing import CliRunner

import cli.main as cli_main
from adapters.http_client import HttpJsonFetcher

runner = CliRunner()


class _FakeFetcher:
    payload = [{"id": "7", "name": "Bob"}]
    seen = []

    def __init__(self, settings):
        self.settings = settings

    async def fetch(self, url):
        _FakeFetcher.seen.append((url, self.settings.http_timeout_seconds))
        return self.payload


def test_default_run_prints_records(monkeypatch):
    monkeypatch.setattr(cli_main, "HttpJsonFetcher", _FakeFetcher)
    _FakeFetcher.seen = []

    result = runner.invoke(cli_main.app, [])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["Data received:", "ID: 7, Name: Bob"]
    assert _FakeFetcher.seen == [("https://jsonplaceholder.typicode.com/users", 10.0)]


def test_url_and_timeout_overrides(monkeypatch):
    monkeypatch.setattr(cli_main, "HttpJsonFetcher", _FakeFetcher)
    _FakeFetcher.seen = []

    result = runner.invoke(cli_main.app, ["--url", "https://example.com/users", "--timeout", "2.5"])

    assert result.exit_code == 0
    assert _FakeFetcher.seen == [("https://example.com/users", 2.5)]


def test_target_url_from_environment(monkeypatch):
    monkeypatch.setattr(cli_main, "HttpJsonFetcher", _FakeFetcher)
    monkeypatch.setenv("API_FETCHER_TARGET_URL", "http://localhost:8000/items")
    _FakeFetcher.seen = []

    result = runner.invoke(cli_main.app, [])

    assert result.exit_code == 0
    assert _FakeFetcher.seen[0][0] == "http://localhost:8000/items"


def test_failure_prints_one_error_line_and_exits_zero():
    result = runner.invoke(cli_main.app, ["--url", "ftp://example.com/users"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "Error: Invalid URL: Invalid URL protocol. Only HTTP/HTTPS are allowed."
    ]


def test_strict_mode_exits_nonzero_on_failure():
    result = runner.invoke(cli_main.app, ["--strict", "--url", "not a url"])

    assert result.exit_code == 1
    assert "Error: Invalid URL:" in result.output


def test_deeply_nested_body_prints_one_error_line(monkeypatch):
    transport = httpx.MockTransport(
        lambda request: httpx.Response(200, content=b"[" * 100000 + b"]" * 100000)
    )
    monkeypatch.setattr(
        cli_main,
        "HttpJsonFetcher",
        lambda settings: HttpJsonFetcher(settings, transport=transport),
    )

    result = runner.invoke(cli_main.app, [])

    assert result.exception is None
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("Error: Failed to fetch data: Invalid JSON in response body")
