# state.py
from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import List

DGRAPH_BINARY = "/usr/local/bin/dgraph"

@dataclass
class DgraphConfig:
    # helper fields
    install_dir: str = "/var/lib/dgraph"
    yaml_filename: str = "config.yaml"
    peer_ip: str = ""
    peer_port: int = 12345
    my_ip: str = ""
    total_groups: int = 2
    selected_groups: List[int] = field(default_factory=list)

    # config.yaml fields
    p: str = ""                 # posting lists directory
    w: str = ""                 # raft write-ahead logs directory
    export: str = ""            # exports directory
    port: int = 8080            # HTTP
    grpc_port: int = 9080
    workerport: int = 12345     # internal worker communication
    idx: int = 1                # raft id
    groups: str = "0,1"
    gentlecommit: float = 0.1
    trace: float = 0.33
    debugmode: bool = False
    memory_mb: float = 1024.0

    # command-line fields
    bindall: bool = False
    peer: str = ""              # ip:port of any healthy peer
    my: str = ""                # ip:port other servers use to reach this one

    def derive_subdirectories(self) -> None:
        self.p = os.path.join(self.install_dir, "p")
        self.w = os.path.join(self.install_dir, "w")
        self.export = os.path.join(self.install_dir, "exports")

    def update_peer(self) -> None:
        self.peer = f"{self.peer_ip}:{self.peer_port}" if self.peer_ip else ""

    def update_my(self) -> None:
        self.my = f"{self.my_ip}:{self.workerport}" if self.my_ip else ""

    @property
    def config_path(self) -> str:
        return os.path.join(self.install_dir, self.yaml_filename)

    def to_yaml_dict(self) -> dict:
        return {
            "p": self.p,
            "w": self.w,
            "export": self.export,
            "port": self.port,
            "grpc_port": self.grpc_port,
            "workerport": self.workerport,
            "idx": self.idx,
            "groups": self.groups,
            "gentlecommit": self.gentlecommit,
            "trace": self.trace,
            "debugmode": self.debugmode,
            "memory_mb": self.memory_mb,
        }

    def bindall_flag(self) -> str:
        return f"--bindall={'true' if self.bindall else 'false'}"

    def config_flag(self) -> str:
        return f"--config={self.config_path}"

    def start_command(self) -> str:
        parts = [DGRAPH_BINARY, self.bindall_flag(), self.config_flag()]
        if self.peer:
            parts.append(f"--peer={self.peer}")
        if self.my:
            parts.append(f"--my={self.my}")
        return " ".join(parts)

    def server_starts_on(self) -> str:
        if self.bindall:
            return "Server host is 0.0.0.0"
        return "Server host is 127.0.0.1"
