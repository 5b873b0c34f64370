from __future__ import annotations

from pathlib import Path

from simplecli.config import ConsoleConfig, load_config


def _clear_env(monkeypatch) -> None:
    for name in ("SIMPLECLI_OVERWRITE_COMMANDS", "SIMPLECLI_PROMPT", "SIMPLECLI_LOG_NAME", "LOG_LEVEL"):
        # setenv first so monkeypatch restores the original state afterwards
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults(monkeypatch, tmp_path: Path):
    _clear_env(monkeypatch)
    cfg = load_config(str(tmp_path / "missing.env"))
    assert cfg == ConsoleConfig()
    assert cfg.prompt == ">> "
    assert cfg.overwrite_commands is False


def test_environment_overrides(monkeypatch, tmp_path: Path):
    _clear_env(monkeypatch)
    monkeypatch.setenv("SIMPLECLI_OVERWRITE_COMMANDS", "Yes")
    monkeypatch.setenv("SIMPLECLI_PROMPT", "$ ")
    monkeypatch.setenv("SIMPLECLI_LOG_NAME", "OPS")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    cfg = load_config(str(tmp_path / "missing.env"))

    assert cfg.overwrite_commands is True
    assert cfg.prompt == "$ "
    assert cfg.log_name == "OPS"
    assert cfg.log_level == "debug"


def test_dotenv_file_is_loaded(monkeypatch, tmp_path: Path):
    _clear_env(monkeypatch)
    env_file = tmp_path / ".env"
    env_file.write_text("SIMPLECLI_OVERWRITE_COMMANDS=0\nSIMPLECLI_LOG_NAME=FROMFILE\n", encoding="utf-8")

    cfg = load_config(str(env_file))

    assert cfg.overwrite_commands is False
    assert cfg.log_name == "FROMFILE"
