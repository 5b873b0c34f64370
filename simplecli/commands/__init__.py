"""Command registration for SimpleCLI.

This package exposes the ``CommandRegistry`` which maps command names to
handler callables, along with the ``RegistrationOutcome`` returned by every
registration attempt.
"""

from .registry import CommandHandler, CommandRegistry, RegistrationOutcome  # noqa: F401

__all__ = ["CommandHandler", "CommandRegistry", "RegistrationOutcome"]
