# wizard.py
from __future__ import annotations
import os
from typing import List, Optional, Tuple

from groups import split_groups
from prompter import Prompter
from state import DgraphConfig
from validators import (
    always_valid,
    compose_validators,
    groups_range_validator,
    validate_fraction,
    validate_groups_format,
    validate_ipv4,
    validate_min_groups,
    validate_min_memory,
    validate_port,
    validate_positive_int,
    validate_required,
)
from logger import log

# Above this many groups a checkbox menu gets unwieldy
MENU_MAX_GROUPS = 10

SUMMARY_HEADERS = ("Key", "Value", "Description", "Destination")


def build_summary_rows(cfg: DgraphConfig) -> List[Tuple[str, str, str, str]]:
    dest = cfg.config_path
    return [
        ("p", cfg.p, "Postings Files Directory", cfg.p),
        ("w", cfg.w, "Write-Ahead Logs Directory", cfg.w),
        ("export", cfg.export, "Exports Directory", cfg.export),
        ("port", str(cfg.port), "HTTP port", dest),
        ("grpc_port", str(cfg.grpc_port), "gRPC port", dest),
        ("workerport", str(cfg.workerport), "Internal worker port", dest),
        ("idx", str(cfg.idx), "Raft ID for joining groups", dest),
        ("total groups", str(cfg.total_groups), "The total number of groups", "nil"),
        ("groups", cfg.groups, "Groups for this server", dest),
        ("memory_mb", f"{cfg.memory_mb:.2f}", "Estimated Memory in MB", dest),
        ("gentlecommit", f"{cfg.gentlecommit:.2f}", "Dirty posting commit freq", dest),
        ("trace", f"{cfg.trace:.2f}", "Ratio of queries to trace", dest),
        ("debugmode", _bool_str(cfg.debugmode), "Debug mode", dest),
        ("bindall", _bool_str(cfg.bindall), cfg.server_starts_on(), cfg.bindall_flag()),
    ]


def _bool_str(value: bool) -> str:
    return "true" if value else "false"


def expand_home(path: str) -> str:
    if path.startswith("~/"):
        return os.path.expanduser(path)
    return path


class Wizard:
    """Asks the configuration questions in order and fills in a DgraphConfig."""

    def __init__(self, prompter: Prompter, cfg: Optional[DgraphConfig] = None) -> None:
        self.prompt = prompter
        self.cfg = cfg if cfg is not None else DgraphConfig()

    async def run(self) -> Optional[DgraphConfig]:
        """Walk every gate, show the summary, return the config if confirmed."""
        cfg = self.cfg
        log.info("Wizard started")

        if await self._gate(f"Change dgraph's base directory? [{cfg.install_dir}]"):
            await self.change_install_dir()
        cfg.derive_subdirectories()

        if await self._gate("Change dgraph's subdirectories?"):
            await self.change_subdirectories()
        if await self._gate("Change dgraph's ports config?"):
            await self.change_ports()
        if await self._gate("Change dgraph's engine config?"):
            await self.change_engine()
        if await self._gate("Change dgraph's cluster config?"):
            await self.change_cluster()

        confirmed = await self.prompt.confirm_table(
            "Proceed with install?",
            SUMMARY_HEADERS,
            build_summary_rows(cfg),
            default=True,
        )
        if not confirmed:
            log.info("Install declined at confirmation")
            return None
        log.info("Install confirmed: %s", cfg.to_yaml_dict())
        return cfg

    async def _gate(self, message: str) -> bool:
        answer = await self.prompt.ask_yes_no(message, False)
        log.info("Gate %r -> %s", message, answer)
        return answer

    # -- Install directory ---------------------------------------------------

    async def change_install_dir(self) -> None:
        answer = await self.prompt.ask_string(
            "The directory to store data folders and config files",
            self.cfg.install_dir,
            validate_required,
        )
        self.cfg.install_dir = expand_home(answer)

    async def change_subdirectories(self) -> None:
        cfg = self.cfg
        cfg.p = await self.prompt.ask_string(
            "The directory to store posting lists?", cfg.p, always_valid
        )
        cfg.w = await self.prompt.ask_string(
            "The directory to store write-ahead logs?", cfg.w, always_valid
        )
        cfg.export = await self.prompt.ask_string(
            "The directory to store exports?", cfg.export, always_valid
        )

    # -- Ports ---------------------------------------------------------------

    async def change_ports(self) -> None:
        cfg = self.cfg
        cfg.port = await self.prompt.ask_integer(
            "The port to serve http?", cfg.port, validate_port
        )
        cfg.grpc_port = await self.prompt.ask_integer(
            "The port to serve grpc?", cfg.grpc_port, validate_port
        )
        cfg.workerport = await self.prompt.ask_integer(
            "The port for worker communication?", cfg.workerport, validate_port
        )
        cfg.update_my()

    # -- Engine --------------------------------------------------------------

    async def change_engine(self) -> None:
        cfg = self.cfg
        cfg.memory_mb = await self.prompt.ask_float(
            "Estimated memory the process can take (MB)",
            cfg.memory_mb,
            validate_min_memory,
        )
        cfg.debugmode = await self.prompt.ask_yes_no("Debug Mode?", cfg.debugmode)
        cfg.gentlecommit = await self.prompt.ask_float(
            "Fraction of dirty posting lists to commit every few seconds",
            cfg.gentlecommit,
            validate_fraction,
        )
        cfg.trace = await self.prompt.ask_float(
            "The ratio of queries to trace", cfg.trace, validate_fraction
        )

    # -- Cluster -------------------------------------------------------------

    async def change_cluster(self) -> None:
        cfg = self.cfg
        cfg.bindall = True
        cfg.idx = await self.prompt.ask_integer(
            "RAFT ID that this server will use to join RAFT groups?",
            cfg.idx,
            validate_positive_int,
        )
        if not await self.prompt.ask_yes_no(
            "Is this the first server in the cluster?", False
        ):
            await self.change_peer()
        await self.change_total_groups()
        await self.change_my_ip()

    async def change_peer(self) -> None:
        cfg = self.cfg
        cfg.peer_ip = await self.prompt.ask_string(
            "The IP of a healthy peer in the cluster?", cfg.peer_ip, validate_ipv4
        )
        cfg.update_peer()
        cfg.peer_port = await self.prompt.ask_integer(
            "The workerport of the same peer", cfg.peer_port, validate_port
        )
        cfg.update_peer()
        log.info("Peer set to %s", cfg.peer)

    async def change_total_groups(self) -> None:
        self.cfg.total_groups = await self.prompt.ask_integer(
            "The total number of groups?", self.cfg.total_groups, validate_min_groups
        )
        await self.change_selected_groups()

    async def change_selected_groups(self) -> None:
        cfg = self.cfg
        if cfg.total_groups > MENU_MAX_GROUPS:
            cfg.groups = await self.prompt.ask_string(
                "Enter the groups for this server "
                "(comma separated ints and int ranges accepted)",
                cfg.groups,
                compose_validators(
                    validate_groups_format,
                    groups_range_validator(cfg.total_groups),
                ),
            )
        else:
            selected = await self.prompt.ask_multi_select(
                "Select the groups (must choose at least one option)",
                0,
                cfg.total_groups,
            )
            cfg.groups = ",".join(str(g) for g in sorted(selected))
        cfg.selected_groups = split_groups(cfg.groups)
        log.info("Groups set to %s (of %d)", cfg.groups, cfg.total_groups)

    async def change_my_ip(self) -> None:
        cfg = self.cfg
        cfg.my_ip = await self.prompt.ask_string(
            "The IP of this server?", cfg.my_ip, validate_ipv4
        )
        cfg.update_my()
        log.info("This server reachable at %s", cfg.my)
