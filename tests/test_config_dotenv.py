from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_enum_wire import cli as cli_module
from lib_enum_wire import config as wire_config


@pytest.fixture(autouse=True)
def _reset_dotenv_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Reset shared dotenv state and codec settings around each test."""

    for name in (wire_config.ENV_NAMING, wire_config.ENV_STRICT_UNKNOWN, wire_config.ENV_VALIDATE_UNIQUE):
        monkeypatch.delenv(name, raising=False)
    wire_config._reset_dotenv_state_for_testing()
    yield
    wire_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values from a parent directory."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("ENUM_WIRE_NAMING=kebab\n")
    monkeypatch.chdir(nested)

    loaded = wire_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert os.environ["ENUM_WIRE_NAMING"] == "kebab"
    assert wire_config.CodecSettings.from_env().naming == "kebab"

    os.environ.pop("ENUM_WIRE_NAMING", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    (tmp_path / ".env").write_text("ENUM_WIRE_NAMING=kebab\n")
    monkeypatch.setenv("ENUM_WIRE_NAMING", "camel")

    result = wire_config.enable_dotenv(tmp_path)

    assert result is not None
    assert os.environ["ENUM_WIRE_NAMING"] == "camel"


def test_enable_dotenv_runs_once_per_process(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("ENUM_WIRE_STRICT_UNKNOWN=1\n")

    first = wire_config.enable_dotenv(tmp_path)
    second = wire_config.enable_dotenv(tmp_path / "elsewhere")

    assert first == second == (tmp_path / ".env").resolve()
    os.environ.pop("ENUM_WIRE_STRICT_UNKNOWN", None)


def test_settings_from_env_parses_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(wire_config.ENV_NAMING, "Camel")
    monkeypatch.setenv(wire_config.ENV_STRICT_UNKNOWN, "yes")
    monkeypatch.setenv(wire_config.ENV_VALIDATE_UNIQUE, "0")

    settings = wire_config.CodecSettings.from_env()

    assert settings == wire_config.CodecSettings(naming="camel", strict_unknown=True, validate_unique=False)


def test_settings_overrides_skip_none(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(wire_config.ENV_NAMING, "kebab")

    settings = wire_config.CodecSettings.from_env(naming=None, strict_unknown=True)

    assert settings.naming == "kebab"
    assert settings.strict_unknown is True


def test_unknown_naming_in_environment_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(wire_config.ENV_NAMING, "shouty")

    with pytest.raises(ValueError, match="Unknown naming strategy"):
        wire_config.CodecSettings.from_env()


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(wire_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(wire_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {wire_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["info"], env=env)
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env=env)
    assert result.exit_code == 0
    assert calls == []
