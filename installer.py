# installer.py
from __future__ import annotations
from typing import Optional
from state import DgraphConfig
from system.config_file import create_directories, write_config_yaml
from system.install_script import download_and_install
from system.systemd import SystemdManager
from logger import log


class Installer:
    """
    Applies a confirmed config: installs dgraph, writes config.yaml and
    the systemd unit, then starts the service.

    Stops at the first failing step and leaves earlier steps in place.
    Errors (OSError, subprocess.CalledProcessError) propagate to the caller.
    """

    def __init__(self, cfg: DgraphConfig, systemd: Optional[SystemdManager] = None) -> None:
        self.cfg = cfg
        self.systemd = systemd if systemd is not None else SystemdManager()

    def run(self) -> None:
        cfg = self.cfg
        print("Installing...")
        log.info("Install started")
        download_and_install()
        create_directories(cfg)
        write_config_yaml(cfg)
        self.systemd.write_unit(cfg.start_command())
        self.systemd.start()
        self.systemd.status()
        log.info("Install complete – %s started", self.systemd.service)
