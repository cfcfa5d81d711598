# system/config_file.py
from __future__ import annotations
import os
from pathlib import Path
import yaml
from state import DgraphConfig
from logger import log


class _Quoted(str):
    pass


class ConfigDumper(yaml.SafeDumper):
    """Emits groups double-quoted and whole floats without a fraction (1024, not 1024.0)."""


def _represent_quoted(dumper, data):
    return dumper.represent_scalar("tag:yaml.org,2002:str", str(data), style='"')


def _represent_float(dumper, data):
    if data.is_integer():
        return dumper.represent_int(int(data))
    return dumper.represent_float(data)


ConfigDumper.add_representer(_Quoted, _represent_quoted)
ConfigDumper.add_representer(float, _represent_float)


def render_config_yaml(cfg: DgraphConfig) -> str:
    data = cfg.to_yaml_dict()
    data["groups"] = _Quoted(data["groups"])
    return yaml.dump(
        data, Dumper=ConfigDumper, default_flow_style=False, sort_keys=False
    )


def create_directories(cfg: DgraphConfig) -> None:
    for d in (cfg.install_dir, cfg.p, cfg.w, cfg.export):
        os.makedirs(d, exist_ok=True)
        log.info("Ensured directory %s", d)


def write_config_yaml(cfg: DgraphConfig) -> Path:
    path = Path(cfg.config_path)
    with open(path, "w") as f:
        f.write(render_config_yaml(cfg))
    os.chmod(path, 0o644)
    log.info("Wrote dgraph config to %s", path)
    return path
