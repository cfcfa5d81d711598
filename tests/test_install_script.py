# tests/test_install_script.py
import os
import subprocess

import pytest
import system.install_script as install_mod
from system.install_script import download_and_install


def test_download_runs_and_removes_script(tmp_path, monkeypatch):
    calls = []

    def fake_run(*cmd):
        calls.append(list(cmd))
        if cmd[0] == "curl":
            (tmp_path / "install_dgraph.sh").write_text("#!/bin/sh\n")

    monkeypatch.setattr(install_mod, "run_command", fake_run)
    download_and_install(workdir=str(tmp_path))

    script = str(tmp_path / "install_dgraph.sh")
    assert calls[0] == [
        "curl", "--fail", "-sSL", "https://nightly.dgraph.io", "-o", script,
    ]
    assert calls[1] == [os.path.abspath(script)]
    assert not os.path.exists(script)

def test_download_failure_stops(tmp_path, monkeypatch):
    calls = []

    def fake_run(*cmd):
        calls.append(list(cmd))
        raise subprocess.CalledProcessError(22, cmd)

    monkeypatch.setattr(install_mod, "run_command", fake_run)
    with pytest.raises(subprocess.CalledProcessError):
        download_and_install(workdir=str(tmp_path))
    assert len(calls) == 1

def test_script_failure_still_removes_script(tmp_path, monkeypatch):
    def fake_run(*cmd):
        if cmd[0] == "curl":
            (tmp_path / "install_dgraph.sh").write_text("#!/bin/sh\nexit 1\n")
            return
        raise subprocess.CalledProcessError(1, cmd)

    monkeypatch.setattr(install_mod, "run_command", fake_run)
    with pytest.raises(subprocess.CalledProcessError):
        download_and_install(workdir=str(tmp_path))
    assert not (tmp_path / "install_dgraph.sh").exists()
