"""
Console configuration.

Settings are read from the process environment.  A ``.env`` file in the
working directory (or the one passed to ``load_config``) is loaded first via
python-dotenv, so operators can keep console settings next to the rest of the
embedding application's configuration.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ConsoleConfig:
    """Construction options for a :class:`~simplecli.console.Console`."""

    overwrite_commands: bool = False
    prompt: str = ">> "
    log_name: str = "CONSOLE"
    log_level: Optional[str] = None


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def load_config(env_file: Optional[str] = None) -> ConsoleConfig:
    """Build a ``ConsoleConfig`` from ``SIMPLECLI_*`` environment variables."""
    load_dotenv(env_file)
    return ConsoleConfig(
        overwrite_commands=_env_flag("SIMPLECLI_OVERWRITE_COMMANDS"),
        prompt=os.getenv("SIMPLECLI_PROMPT", ">> "),
        log_name=os.getenv("SIMPLECLI_LOG_NAME", "CONSOLE"),
        log_level=os.getenv("LOG_LEVEL") or None,
    )
