# system/systemd.py
from __future__ import annotations
import os
from pathlib import Path
from system.commands import run_command
from logger import log

SYSTEMD_DIR = Path("/etc/systemd/system")
SERVICE_NAME = "dgraph"
UNIT_FILENAME = f"{SERVICE_NAME}.service"

UNIT_TEMPLATE = """\
[Unit]
Description = Dgraph graph database
Wants=network-online.target
After=network.target network-online.target

[Service]
ExecStart = {exec_start}
"""


def render_unit(exec_start: str) -> str:
    return UNIT_TEMPLATE.format(exec_start=exec_start)


class SystemdManager:
    def __init__(self, unit_dir=None, service: str = SERVICE_NAME):
        self.unit_dir = Path(unit_dir) if unit_dir is not None else SYSTEMD_DIR
        self.service = service

    @property
    def unit_path(self) -> Path:
        return self.unit_dir / f"{self.service}.service"

    def write_unit(self, exec_start: str) -> Path:
        """Write the unit file and make systemd pick it up."""
        path = self.unit_path
        path.write_text(render_unit(exec_start))
        os.chmod(path, 0o644)
        log.info("Wrote systemd unit to %s", path)
        self.daemon_reload()
        return path

    def daemon_reload(self) -> None:
        run_command("systemctl", "daemon-reload")

    def start(self) -> None:
        run_command("systemctl", "start", self.service)

    def status(self) -> None:
        run_command("systemctl", "status", self.service)
