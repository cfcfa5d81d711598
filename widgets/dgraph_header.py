# widgets/dgraph_header.py
from __future__ import annotations
import pyfiglet
from textual.widgets import Static

BANNER_TEXT = "dgraph"
SUBTITLE = "install helper  ·  writes config.yaml and the dgraph systemd unit"


def render_banner(text: str = BANNER_TEXT, subtitle: str = SUBTITLE) -> str:
    art = pyfiglet.figlet_format(text, font="small").rstrip("\n")
    return f"{art}\n{subtitle}"


class DgraphHeader(Static):
    """Banner on top of each question: figlet title plus a subtitle line."""

    DEFAULT_CSS = """
    DgraphHeader {
        color: #e5473d;
        text-style: bold;
        width: 100%;
        height: auto;
        padding: 0 2;
        border-bottom: solid #e5473d;
    }
    """

    def __init__(self, subtitle: str = SUBTITLE) -> None:
        super().__init__(render_banner(subtitle=subtitle), markup=False)
