# screens/yes_no.py
from __future__ import annotations
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Footer, Button, Static
from textual.containers import Vertical, Horizontal
from widgets.dgraph_header import DgraphHeader
from logger import log


class YesNoScreen(Screen):
    """Gate question. Dismisses with True for yes, False for no."""

    BINDINGS = [
        ("y", "choose(True)", "Yes"),
        ("n", "choose(False)", "No"),
    ]

    def __init__(self, message: str, default: bool = False) -> None:
        super().__init__()
        self.question = message
        self._default = default
        # Enter answers with the default
        self.AUTO_FOCUS = "#btn_yes" if default else "#btn_no"

    def compose(self) -> ComposeResult:
        yield DgraphHeader()
        with Vertical(id="content"):
            yield Static(self.question, classes="title", id="question", markup=False)
            yield from self.compose_details()
        with Horizontal(id="nav_buttons"):
            yield Button(
                "Yes", id="btn_yes",
                variant="primary" if self._default else "default",
            )
            yield Button(
                "No", id="btn_no",
                variant="default" if self._default else "primary",
            )
        yield Footer()

    def compose_details(self) -> ComposeResult:
        """Extra widgets shown between the question and the buttons."""
        return iter(())

    def action_choose(self, answer: bool) -> None:
        log.info("Answer for %r: %s", self.question, "yes" if answer else "no")
        self.dismiss(answer)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn_yes":
            self.action_choose(True)
        elif event.button.id == "btn_no":
            self.action_choose(False)
