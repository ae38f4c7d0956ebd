import sys

from cli import main as cli_main


def test_run_invokes_app(monkeypatch):
    calls = []
    monkeypatch.setattr(cli_main, "app", lambda: calls.append("app"))
    cli_main.run()
    assert calls == ["app"]


def test_run_reconfigures_streams_on_windows(monkeypatch):
    encodings = []

    class _Stream:
        def reconfigure(self, *, encoding):
            encodings.append(encoding)

    monkeypatch.setattr(sys, "platform", "win32")
    monkeypatch.setattr(sys, "stdout", _Stream())
    monkeypatch.setattr(sys, "stderr", _Stream())
    monkeypatch.setattr(cli_main, "app", lambda: None)
    cli_main.run()
    assert encodings == ["utf-8", "utf-8"]
