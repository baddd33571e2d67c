"""
Tests for configuration and the command-line entry point.

Covers flag/environment precedence and the startup failure exits.
Only the bind-failure test lets uvicorn start, against an occupied port.
"""

import socket
from pathlib import Path

import pytest

from errorpages import cli
from errorpages.cli import build_parser, load_settings, main
from errorpages.core.config import Settings


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run each test away from any .env file and stray variables."""
    monkeypatch.chdir(tmp_path)
    for name in ("PORT", "HOST", "LOG_LEVEL", "TEMPLATE_PATH", "CACHE_CONTROL"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for environment-loaded settings."""

    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.port == 80
        assert settings.host == "0.0.0.0"
        assert settings.template_path is None
        assert settings.cache_control is None

    def test_port_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8080")
        assert Settings().port == 8080

    def test_port_from_dotenv(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("PORT=8181\n", encoding="utf-8")
        assert Settings().port == 8181


class TestLoadSettings:
    """Tests for merging command-line flags over the environment."""

    def test_flag_overrides_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8080")
        args = build_parser().parse_args(["--port", "9000"])
        assert load_settings(args).port == 9000

    def test_environment_used_without_flag(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PORT", "8080")
        args = build_parser().parse_args([])
        assert load_settings(args).port == 8080

    def test_default_without_flag_or_environment(self) -> None:
        args = build_parser().parse_args([])
        assert load_settings(args).port == 80

    def test_host_and_log_level_flags(self) -> None:
        args = build_parser().parse_args(["--host", "127.0.0.1", "--log-level", "DEBUG"])
        settings = load_settings(args)
        assert settings.host == "127.0.0.1"
        assert settings.log_level == "DEBUG"


class TestMain:
    """Tests for the CLI main function."""

    def test_runs_server_with_configured_address(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls = {}

        def fake_run(app, **kwargs):
            calls["app"] = app
            calls.update(kwargs)

        monkeypatch.setattr(cli.uvicorn, "run", fake_run)
        main(["--port", "8088", "--host", "127.0.0.1"])

        assert calls["port"] == 8088
        assert calls["host"] == "127.0.0.1"
        assert len(calls["app"].state.page_cache) == 16

    def test_bind_failure_exits_nonzero(self) -> None:
        """An occupied port makes uvicorn give up with status 1."""
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as taken:
            taken.bind(("127.0.0.1", 0))
            taken.listen()
            port = taken.getsockname()[1]
            with pytest.raises(SystemExit) as exc_info:
                main(["--host", "127.0.0.1", "--port", str(port)])
        assert exc_info.value.code == 1

    def test_missing_template_exits_nonzero(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TEMPLATE_PATH", str(tmp_path / "missing.html"))
        monkeypatch.setattr(cli.uvicorn, "run", lambda app, **kwargs: None)
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
