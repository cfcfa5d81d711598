# screens/multi_select.py
from __future__ import annotations
from typing import List
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Footer, Button, Static, SelectionList
from textual.widgets.selection_list import Selection
from textual.containers import Vertical, Horizontal
from widgets.dgraph_header import DgraphHeader
from logger import log


class MultiSelectScreen(Screen):
    """Pick at least one option; dismisses with the chosen values, sorted."""

    AUTO_FOCUS = "#option_list"

    def __init__(self, message: str, options: List[int]) -> None:
        super().__init__()
        self.question = message
        self._options = options

    def compose(self) -> ComposeResult:
        yield DgraphHeader()
        with Vertical(id="content"):
            yield Static(self.question, classes="title", id="question", markup=False)
            yield Static(
                "Use [bold]Space[/bold] to toggle, [bold]↑↓[/bold] to navigate."
            )
            yield SelectionList(
                *[Selection(str(v), v, initial_state=False) for v in self._options],
                id="option_list",
            )
            yield Static("", id="err_msg")
        with Horizontal(id="nav_buttons"):
            yield Button("Done →", id="btn_next", variant="primary")
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id != "btn_next":
            return
        selected = sorted(self.query_one("#option_list", SelectionList).selected)
        if not selected:
            self.query_one("#err_msg", Static).update(
                "[red]Error: Select at least one option.[/red]"
            )
            return
        log.info("Selection for %r: %s", self.question, selected)
        self.dismiss(selected)
