"""Unit tests for discover CLI command.

These tests verify the discover command prints discovered URLs or writes
them to a file. UrlDiscoveryService.discover_urls is monkeypatched.
"""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from langcrawl.cli.app import app

runner = CliRunner()


def test_discover_command_writes_stdout(monkeypatch) -> None:
    async def _fake_discover(self) -> list[str]:
        return ["https://x.co/pl/a", "https://x.co/pl/b"]

    monkeypatch.setattr(
        "langcrawl.cli.commands.discover.UrlDiscoveryService.discover_urls",
        _fake_discover,
    )

    result = runner.invoke(app, ["discover", "https://x.co/pl"])

    assert result.exit_code == 0, result.output
    assert "https://x.co/pl/a" in result.output
    assert "Unique URLs: 2" in result.output


def test_discover_command_writes_file(tmp_path: Path, monkeypatch) -> None:
    async def _fake_discover(self) -> list[str]:
        return ["https://x.co/pl/a"]

    monkeypatch.setattr(
        "langcrawl.cli.commands.discover.UrlDiscoveryService.discover_urls",
        _fake_discover,
    )

    output_path = tmp_path / "urls.txt"
    result = runner.invoke(app, ["discover", "https://x.co/pl", "-o", str(output_path)])

    assert result.exit_code == 0
    assert output_path.read_text().strip() == "https://x.co/pl/a"
    assert "Wrote 1 URLs" in result.output


def test_discover_command_uses_scope_options(monkeypatch) -> None:
    targets = []

    async def _fake_discover(self) -> list[str]:
        targets.append(self.target)
        return []

    monkeypatch.setattr(
        "langcrawl.cli.commands.discover.UrlDiscoveryService.discover_urls",
        _fake_discover,
    )

    result = runner.invoke(
        app,
        ["discover", "https://x.co/", "--path-filter", "/pl-pl", "-n", "3", "--delay-ms", "0"],
    )

    assert result.exit_code == 0
    assert "Unique URLs: 0" in result.output
    assert targets[0].host == "x.co"
    assert targets[0].path_filter == "/pl-pl"
    assert targets[0].max_urls == 3


def test_discover_command_rejects_invalid_url() -> None:
    result = runner.invoke(app, ["discover", "not-a-url"])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
