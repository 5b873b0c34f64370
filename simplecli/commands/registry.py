"""
Command registry for the console.

This module holds the mapping from command names to handlers.  Registration
follows a fail-fast policy: it never blocks the caller and never raises for a
rejected registration.  Every outcome is logged and also returned as a
:class:`RegistrationOutcome`, so callers can check it in code.

The registry also owns the console's lifecycle flag.  Once the console is
running the mapping is frozen: further registrations are refused, and the
dispatch loop reads the mapping without taking the lock.
"""
from __future__ import annotations

import enum
import logging
import threading
from types import MappingProxyType
from typing import Callable, Dict, Iterator, List, Mapping, Optional

from ..utils.logging_system import setup_log_system

CommandHandler = Callable[[List[str]], None]


class RegistrationOutcome(enum.Enum):
    """Result of a call to :meth:`CommandRegistry.register`."""

    REGISTERED = "registered"
    OVERWRITTEN = "overwritten"
    SKIPPED_DUPLICATE = "skipped_duplicate"
    REJECTED_RUNNING = "rejected_running"
    REJECTED_BUSY = "rejected_busy"

    @property
    def accepted(self) -> bool:
        return self in (RegistrationOutcome.REGISTERED, RegistrationOutcome.OVERWRITTEN)


class CommandRegistry:
    """
    Maps command names to handlers and tracks whether the console is running.

    Parameters
    ----------
    logger:
        Sink for registration messages.  If ``None`` a default logger writing
        to stdout with a ``CONSOLE:`` prefix is created.
    overwrite_commands:
        When true, registering an existing name replaces its handler.  When
        false the new handler is ignored.  Fixed for the registry's lifetime.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, overwrite_commands: bool = False) -> None:
        self.logger: logging.Logger = logger if logger is not None else setup_log_system("CONSOLE")
        self._overwrite_commands = bool(overwrite_commands)
        self._commands: Dict[str, CommandHandler] = {}
        self._lock = threading.Lock()
        self._running = threading.Event()

    @property
    def overwrite_commands(self) -> bool:
        return self._overwrite_commands

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def register(self, name: str, handler: CommandHandler) -> RegistrationOutcome:
        """
        Bind ``name`` to ``handler``.

        The call is refused while the console is running, or if another
        thread is registering at the same moment.  A duplicate name is
        skipped or replaced depending on ``overwrite_commands``.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("command name must be a non-empty string")
        if not callable(handler):
            raise TypeError(f"handler for command {name!r} is not callable")

        if self._running.is_set():
            self.logger.warning("For thread safety, commands cannot be registered while the console is running")
            self.logger.warning("If you're seeing this message you might be trying to register commands after starting the console")
            return RegistrationOutcome.REJECTED_RUNNING

        if not self._lock.acquire(blocking=False):
            self.logger.warning("If you're seeing this message you might be trying to register commands from multiple threads")
            self.logger.warning("For thread safety please refrain from doing so")
            return RegistrationOutcome.REJECTED_BUSY
        try:
            outcome = RegistrationOutcome.REGISTERED
            if name in self._commands:
                if not self._overwrite_commands:
                    self.logger.info(f"\t|--\tCommand {name} already registered, skipping")
                    return RegistrationOutcome.SKIPPED_DUPLICATE
                self.logger.info(f"\t|--\tCommand {name} already registered, overwriting")
                outcome = RegistrationOutcome.OVERWRITTEN
            self.logger.info(f"\t|--\tRegistering command {name}")
            self._commands[name] = handler
            return outcome
        finally:
            self._lock.release()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def commands(self) -> Mapping[str, CommandHandler]:
        """Read-only view of the registered commands."""
        return MappingProxyType(self._commands)

    def get(self, name: str) -> Optional[CommandHandler]:
        return self._commands.get(name)

    def names(self) -> List[str]:
        return list(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._commands))

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self._running.is_set()

    def start(self) -> bool:
        """
        Mark the console as running.

        Takes the registry lock with a blocking acquire, so a registration
        that is already in progress completes before the mapping freezes.
        Returns ``False`` if the console was already running.
        """
        with self._lock:
            if self._running.is_set():
                return False
            self._running.set()
            return True

    def stop(self) -> None:
        self._running.clear()
