from __future__ import annotations

import logging

import pytest


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def messages(self, level: int | None = None) -> list[str]:
        return [r.getMessage() for r in self.records if level is None or r.levelno == level]


@pytest.fixture
def log_handler() -> ListHandler:
    return ListHandler()


@pytest.fixture
def logger(request, log_handler: ListHandler) -> logging.Logger:
    lg = logging.getLogger(f"simplecli.test.{request.node.name}")
    lg.handlers = [log_handler]
    lg.setLevel(logging.DEBUG)
    lg.propagate = False
    return lg
