"""Tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from crud_mcp import __version__
from crud_mcp.api.mcp.server import FastMcpServerAdapter
from crud_mcp.cli import build_api, build_server, cli
from crud_mcp.core.config.settings import ApplicationSettings, ServerSettings, Settings
from crud_mcp.store.logging_api import LoggingResourceApi
from crud_mcp.store.memory import InMemoryResourceApi


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestCli:
    """Test CLI commands that do not start a server."""

    @pytest.mark.unit
    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    @pytest.mark.unit
    def test_info(self, runner):
        """info lists the CRUD tools."""
        result = runner.invoke(cli, ["info"])

        assert result.exit_code == 0
        assert f"crud-mcp v{__version__}" in result.output
        assert "create, get, list, update, delete" in result.output

    @pytest.mark.unit
    def test_demo(self, runner):
        """The demo walks every operation and ends with a NOT_FOUND."""
        result = runner.invoke(cli, ["demo"])

        assert result.exit_code == 0
        assert "=== CRUD MCP Demo ===" in result.output
        assert "Error caught: NOT_FOUND (404)" in result.output
        assert "Operation log:" in result.output
        assert "DELETE users/users-" in result.output

    @pytest.mark.unit
    def test_serve_rejects_unknown_transport(self, runner):
        """An unknown transport fails before the server is built."""
        result = runner.invoke(cli, ["serve", "--transport", "websocket"])

        assert result.exit_code == 2
        assert "Unsupported transport 'websocket'" in result.output

    @pytest.mark.unit
    def test_serve_rejects_bad_seed_file(self, runner, tmp_path):
        """A malformed seed file aborts startup."""
        seed = tmp_path / "seed.yaml"
        seed.write_text("- just\n- a list\n")

        result = runner.invoke(cli, ["serve", "-t", "stdio", "--seed", str(seed)])

        assert result.exit_code == 1
        assert "Failed to load seed file" in result.output


class TestBuildApi:
    """Test API construction."""

    @pytest.mark.unit
    def test_plain_api(self):
        assert isinstance(build_api(), InMemoryResourceApi)

    @pytest.mark.unit
    def test_logging_api(self):
        api = build_api(log_operations=True)

        assert isinstance(api, LoggingResourceApi)
        assert isinstance(api.inner, InMemoryResourceApi)


@pytest.fixture
def serve_calls(monkeypatch):
    """Stub out logging setup and server start, recording what serve asked for."""
    calls = {}

    def fake_configure_logging(level):
        calls["log_level"] = level

    def fake_start(self, transport="stdio", **kwargs):
        calls["transport"] = transport
        calls["version"] = self.health_status()["version"]

    monkeypatch.setattr("crud_mcp.cli.configure_logging", fake_configure_logging)
    monkeypatch.setattr(FastMcpServerAdapter, "start", fake_start)
    for name in ("DEBUG", "LOG_LEVEL", "MCP_TRANSPORT", "MCP_SERVER_VERSION"):
        monkeypatch.delenv(name, raising=False)
    return calls


def _fresh_settings() -> Settings:
    return Settings(
        application=ApplicationSettings(_env_file=None),
        server=ServerSettings(_env_file=None),
    )


class TestServe:
    """Test serve startup with the server start stubbed out."""

    @pytest.mark.unit
    def test_debug_env_enables_debug_logging(self, runner, serve_calls, monkeypatch):
        """DEBUG=true turns on debug logging without the --debug flag."""
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setattr("crud_mcp.cli.get_settings", _fresh_settings)

        result = runner.invoke(cli, ["serve", "-t", "stdio"])

        assert result.exit_code == 0, result.output
        assert serve_calls["log_level"] == "DEBUG"
        assert serve_calls["transport"] == "stdio"

    @pytest.mark.unit
    def test_log_level_used_without_debug(self, runner, serve_calls, monkeypatch):
        """Without DEBUG or --debug the configured LOG_LEVEL applies."""
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setattr("crud_mcp.cli.get_settings", _fresh_settings)

        result = runner.invoke(cli, ["serve", "-t", "stdio"])

        assert result.exit_code == 0, result.output
        assert serve_calls["log_level"] == "WARNING"

    @pytest.mark.unit
    def test_server_reports_package_version(self, runner, serve_calls, monkeypatch):
        """The served version matches ``crud-mcp --version`` by default."""
        monkeypatch.setattr("crud_mcp.cli.get_settings", _fresh_settings)

        result = runner.invoke(cli, ["serve", "-t", "stdio"])

        assert result.exit_code == 0, result.output
        assert serve_calls["version"] == __version__


class TestBuildServer:
    """Test server wiring."""

    @pytest.mark.unit
    def test_default_version_is_package_version(self):
        server = build_server(InMemoryResourceApi(), ["users"])

        assert server.health_status()["version"] == __version__
