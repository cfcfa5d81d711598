# system/preflight.py
from __future__ import annotations
import os
import sys
from system.systemd import SYSTEMD_DIR
from logger import log


class PreconditionError(Exception):
    """Host cannot run the installer; nothing has been changed yet."""


def ensure_linux() -> None:
    if not sys.platform.startswith("linux"):
        raise PreconditionError(
            "Currently dgraph_helper can only be used on Linux systems"
        )


def ensure_permissions(unit_dir=None) -> None:
    unit_dir = unit_dir if unit_dir is not None else SYSTEMD_DIR
    if not os.access(unit_dir, os.W_OK):
        raise PreconditionError(
            "Invalid Permissions (try running as root or use sudo)"
        )


def check_preconditions() -> None:
    ensure_linux()
    ensure_permissions()
    log.info("Preconditions OK (platform=%s, unit dir=%s)", sys.platform, SYSTEMD_DIR)
