"""Tests for Settings defaults and validators."""

from __future__ import annotations

from pathlib import Path

import pytest

from locker.config import Settings
from locker.constants import OutputFormat


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for var in ("LOCKER_LOCK_PATH", "LOCKER_LOG_LEVEL", "LOCKER_OUTPUT_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


class TestDefaults:
    def test_defaults_match_cli_contract(self) -> None:
        s = Settings()
        assert s.lock_path == Path("flake.lock")
        assert s.log_level == "WARNING"
        assert s.output_format == OutputFormat.TEXT


class TestEnvironment:
    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOCKER_LOCK_PATH", "/etc/nixos/flake.lock")
        monkeypatch.setenv("LOCKER_OUTPUT_FORMAT", "json")
        s = Settings()
        assert s.lock_path == Path("/etc/nixos/flake.lock")
        assert s.output_format == OutputFormat.JSON

    def test_dotenv_file(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("LOCKER_LOG_LEVEL=debug\n")
        assert Settings().log_level == "DEBUG"

    def test_unprefixed_vars_ignored(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert Settings().log_level == "WARNING"


class TestLogLevelValidation:
    def test_normalized_to_upper(self) -> None:
        assert Settings(log_level=" info ").log_level == "INFO"

    def test_unknown_level_raises(self) -> None:
        with pytest.raises(ValueError, match="log_level must be one of"):
            Settings(log_level="loud")


def test_unknown_output_format_raises() -> None:
    with pytest.raises(ValueError):
        Settings(output_format="yaml")  # type: ignore[arg-type]
