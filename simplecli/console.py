"""
Interactive command console.

The ``Console`` reads lines from a text stream on a background thread,
splits each line into a command name and its arguments and dispatches it to
the handler registered under that name.  Two commands are always available:
``help`` lists the registered commands and ``stop`` ends the loop.

Typical embedding::

    console = Console()
    console.register("reload", lambda args: app.reload())
    done = console.start()
    ...
    done.wait()
"""
from __future__ import annotations

import logging
import queue
import sys
import threading
from typing import Callable, List, Optional, TextIO

from .commands import CommandHandler, CommandRegistry, RegistrationOutcome
from .config import ConsoleConfig
from .utils.logging_system import setup_log_system


class Console:
    """Owns the dispatch loop and its run/stop lifecycle."""

    def __init__(
        self,
        registry: Optional[CommandRegistry] = None,
        *,
        config: Optional[ConsoleConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
        overwrite_commands: Optional[bool] = None,
    ) -> None:
        self.config = config or ConsoleConfig()
        if registry is not None and (logger is not None or overwrite_commands is not None):
            raise ValueError("logger and overwrite_commands belong to the registry; configure it directly")
        if registry is None:
            if logger is None:
                logger = setup_log_system(self.config.log_name, level=self.config.log_level)
            if overwrite_commands is None:
                overwrite_commands = self.config.overwrite_commands
            registry = CommandRegistry(logger, overwrite_commands)
        self.registry = registry
        self.logger = registry.logger
        self.prompt = self.config.prompt

        self._stdin = stdin
        self._stdout = stdout
        self._thread: Optional[threading.Thread] = None
        self._stopped = threading.Event()
        self._start_lock = threading.Lock()

    # Streams are looked up lazily so tests and embedders can swap sys.stdin.
    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def _print(self, *values: object, end: str = "\n") -> None:
        print(*values, end=end, file=self.stdout, flush=True)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def register(self, name: str, handler: CommandHandler) -> RegistrationOutcome:
        """Register ``handler`` under ``name``.  See :meth:`CommandRegistry.register`."""
        return self.registry.register(name, handler)

    def command(self, name: str) -> Callable[[CommandHandler], CommandHandler]:
        """Decorator form of :meth:`register`."""

        def decorator(func: CommandHandler) -> CommandHandler:
            self.register(name, func)
            return func

        return decorator

    def _register_builtin_commands(self) -> None:
        def help_handler(args: List[str]) -> None:
            self._print("Available Commands:")
            for name in self.registry.names():
                self._print(" -", name)

        def stop_handler(args: List[str]) -> None:
            self.logger.info("Received stop command via console")
            self._print("Stopping application...")
            self.registry.stop()

        self.register("help", help_handler)
        self.register("stop", stop_handler)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self.registry.is_running

    def start(self, done: Optional["queue.Queue[None]"] = None) -> threading.Event:
        """
        Start the dispatch loop on a background thread and return immediately.

        The returned event is set once the loop exits.  If ``done`` is given,
        exactly one ``None`` is put on it at the same moment.  Calling
        ``start`` while a loop is active logs a warning and returns the
active loop's event.
        """
        with self._start_lock:
            if self.is_running or (self._thread is not None and self._thread.is_alive()):
                self.logger.warning("Console is already running")
                return self._stopped

            self._register_builtin_commands()

            self.logger.info("Starting console...")
            self._print("Starting console...")

            if not self.registry.start():
                self.logger.warning("Console is already running")
                return self._stopped
            stopped = threading.Event()
            self._stopped = stopped
            self._thread = threading.Thread(
                target=self._run_loop, args=(stopped, done), name="ConsoleThread", daemon=True
            )
            self._thread.start()
            return stopped

    def stop(self) -> None:
        """Ask the loop to stop.  Takes effect at the top of the next iteration."""
        self.registry.stop()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the current loop has exited.  Returns ``False`` on timeout."""
        if self._thread is None:
            return True
        if not self._stopped.wait(timeout):
            return False
        if self._thread is not None:
            self._thread.join(timeout)
        return True

    def run_forever(self) -> int:
        """Run the console until it stops and return the process exit code."""
        stopped = self.start()
        try:
            while not stopped.wait(0.1):
                pass
        except KeyboardInterrupt:
            self.logger.debug("Shutting down (KeyboardInterrupt received)...")
            self.stop()
        return 0

    # ------------------------------------------------------------------
    # Dispatch loop
    # ------------------------------------------------------------------
    def _run_loop(self, stopped: threading.Event, done: Optional["queue.Queue[None]"]) -> None:
        try:
            while self.registry.is_running:
                self._print(self.prompt, end="")
                try:
                    line = self.stdin.readline()
                except (OSError, ValueError) as e:
                    # UnicodeDecodeError is a ValueError
                    self.logger.error(f"Error reading command: {e}")
                    self._print("Error reading command:", e)
                    continue
                if line == "":
                    self.logger.info("Input stream closed, stopping console")
                    self.registry.stop()
                    break
                self.execute(line)
        finally:
            # the loop may also end on an uncaught exception from a handler or stdout
            self.registry.stop()
            try:
                self.logger.info("Console stopped.")
                self._print("Console stopped.")
            finally:
                stopped.set()
                if done is not None:
                    done.put(None)

    def execute(self, line: str) -> None:
        """Tokenize one input line and dispatch it."""
        line = line.strip()
        if not line:
            return

        args = line.split(" ")
        handler = self.registry.get(args[0])
        if handler is not None:
            try:
                handler(args[1:])
            except Exception as e:
                self.logger.debug(f"Command {args[0]} failed", exc_info=True)
                self._print("Error executing command:", e)
            return

        self._print(f"Unknown command: [{' '.join(args)}]")
        fallback = self.registry.get("help")
        if fallback is None:
            return
        try:
            fallback([])
        except Exception:
            self.logger.debug("help command failed", exc_info=True)
