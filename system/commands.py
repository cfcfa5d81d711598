# system/commands.py
from __future__ import annotations
import subprocess
from logger import log


def run_command(*cmd: str) -> None:
    """
    Run a command attached to the operator's terminal.
    Raises subprocess.CalledProcessError on a non-zero exit.
    """
    log.info("Running: %s", " ".join(cmd))
    subprocess.run(list(cmd), check=True)
