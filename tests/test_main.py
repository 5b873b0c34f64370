from __future__ import annotations

import io
import sys

import pytest

from simplecli import main as main_module
from simplecli.main import DemoApp


@pytest.fixture
def demo_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("SIMPLECLI_LOG_NAME", "SIMPLECLI_TEST_DEMO")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")


def test_demo_app_runs_until_stop(demo_env, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("echo hi there\nuptime now\nstop\n"))

    assert DemoApp().run() == 0

    out = capsys.readouterr().out
    assert "hi there\n" in out
    assert "Error executing command: uptime takes no arguments" in out
    assert out.endswith("Console stopped.\n")


def test_main_exits_with_zero(demo_env, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("stop\n"))
    with pytest.raises(SystemExit) as exc:
        main_module.main()
    assert exc.value.code == 0
