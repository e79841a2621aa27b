# File: tests/test_cli.py
"""Тесты для CLI (`paw_scout.cli`) с использованием click.testing.CliRunner.
Проверяют команды `run`, `config`, `sources`, `--version`, а также обработку ошибок.
"""
import asyncio
import importlib
import json
from datetime import datetime

import pytest
from click.testing import CliRunner

from paw_scout.aggregator import aggregate_results
from paw_scout.cli import cli
from paw_scout.logger import init_logging

from .samples import make_result

# the package re-exports the click group under the same name as the module
cli_module = importlib.import_module("paw_scout.cli")


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    # CliRunner closes the stream the CLI logged to
    init_logging(level="WARNING")


@pytest.fixture()
def fake_engine(monkeypatch):
    """Патчим Engine, чтобы run() возвращал готовый отчёт без сети."""
    report = aggregate_results(
        [
            make_result("https://a.example", "/", {"1-1": "/p/1"}),
            make_result("https://b.example", "/", {"1-1": "/q/1", "2-2": "/q/2"}),
        ],
        generated=datetime(2024, 3, 4, 5, 6, 7),
    )
    calls = []

    class FakeEngine:
        def __init__(self, config):
            self.config = config

        def run(self, scan_timeout=None):
            calls.append(scan_timeout)
            return report

    monkeypatch.setattr(cli_module, "Engine", FakeEngine)
    return calls


def test_version_option():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "PawScout" in result.output


def test_show_config_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(cli, ["--log-level", "ERROR", "config"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["timeout"] == 30.0
    assert len(data["sources"]) == 6


def test_show_config_from_file(tmp_path):
    cfg_file = tmp_path / "config.json"
    cfg_file.write_text(
        json.dumps(
            {
                "timeout": 3,
                "sources": [
                    {"site": "https://r.example/", "page": "/a", "kind": "structured", "schema_name": "petfinder"}
                ],
            }
        ),
        encoding="utf-8",
    )
    result = CliRunner().invoke(cli, ["--log-level", "ERROR", "--config", str(cfg_file), "config"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["sources"][0]["site"] == "https://r.example"


def test_bad_config_exits_with_error(tmp_path):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("timeout: -1\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 1


def test_sources_lists_urls(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(cli, ["--log-level", "ERROR", "sources"])
    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    assert len(lines) == 6
    assert lines[0].startswith("pattern")
    assert "https://www.seaaca.org/adoptions/view-our-animals/?&page=0" in lines[0]
    assert lines[-1].startswith("structured")


def test_run_prints_html_to_stdout(tmp_path, monkeypatch, fake_engine):
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(cli, ["--log-level", "ERROR", "run"])
    assert result.exit_code == 0, result.output
    assert "<table>" in result.stdout
    assert '<tr class="presence-1">' in result.stdout
    assert fake_engine == [None]


def test_run_writes_reports(tmp_path, monkeypatch, fake_engine):
    monkeypatch.chdir(tmp_path)
    html = tmp_path / "out" / "index.html"
    js = tmp_path / "out" / "pets.json"
    result = CliRunner().invoke(
        cli,
        ["--log-level", "ERROR", "run", "--html", str(html), "--json", str(js), "--pretty",
         "--scan-timeout", "12"],
    )
    assert result.exit_code == 0, result.output
    assert "<table>" in html.read_text(encoding="utf-8")
    data = json.loads(js.read_text(encoding="utf-8"))
    assert [p["id"] for p in data["pets"]] == ["2-2", "1-1"]
    assert fake_engine == [12.0]


def test_run_rendering_failure_is_fatal(tmp_path, monkeypatch, fake_engine):
    monkeypatch.chdir(tmp_path)

    def broken(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(cli_module, "render_html", broken)
    result = CliRunner().invoke(cli, ["run", "--html", str(tmp_path / "index.html")])
    assert result.exit_code == 1


def test_run_scan_timeout_is_fatal(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    class SlowEngine:
        def __init__(self, config):
            pass

        def run(self, scan_timeout=None):
            raise asyncio.TimeoutError()

    monkeypatch.setattr(cli_module, "Engine", SlowEngine)
    result = CliRunner().invoke(cli, ["run", "--scan-timeout", "0.1"])
    assert result.exit_code == 1
