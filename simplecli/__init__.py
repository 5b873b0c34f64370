"""
SimpleCLI package.

A minimal interactive command console meant to be embedded in a long-running
process.  Operators type a command name followed by space separated
arguments; the console dispatches the line to the handler registered under
that name.
"""

from .commands import CommandHandler, CommandRegistry, RegistrationOutcome  # noqa: F401
from .config import ConsoleConfig, load_config  # noqa: F401
from .console import Console  # noqa: F401

__all__ = [
    "CommandHandler",
    "CommandRegistry",
    "RegistrationOutcome",
    "Console",
    "ConsoleConfig",
    "load_config",
]
