import sys

from readme_studio import __main__ as launcher


def test_main_runs_streamlit_on_the_gui(monkeypatch):
    calls = []
    monkeypatch.setattr(launcher.subprocess, "call", lambda cmd: calls.append(cmd) or 0)
    assert launcher.main(["--server.port", "8600"]) == 0
    cmd = calls[0]
    assert cmd[:4] == [sys.executable, "-m", "streamlit", "run"]
    assert cmd[4].endswith("gui.py")
    assert cmd[5:] == ["--server.port", "8600"]
