"""Utility functions for SimpleCLI.

The ``logging_system`` module provides the logger used by the console when the
embedding application does not supply one.
"""

from .logging_system import setup_log_system, get_logger  # noqa: F401

__all__ = ["setup_log_system", "get_logger"]
