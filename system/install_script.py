# system/install_script.py
from __future__ import annotations
import os
from system.commands import run_command
from logger import log

INSTALL_SCRIPT_URL = "https://nightly.dgraph.io"
INSTALL_SCRIPT_NAME = "install_dgraph.sh"


def download_and_install(workdir: str = ".") -> None:
    """Fetch the vendor install script, run it, then remove it."""
    script = os.path.join(workdir, INSTALL_SCRIPT_NAME)
    run_command("curl", "--fail", "-sSL", INSTALL_SCRIPT_URL, "-o", script)
    try:
        os.chmod(script, 0o755)
        run_command(os.path.abspath(script))
    finally:
        if os.path.exists(script):
            os.remove(script)
            log.info("Removed %s", script)
