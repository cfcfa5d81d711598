# screens/question.py
from __future__ import annotations
from rich.markup import escape
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Footer, Button, Static, Input
from textual.containers import Vertical, Horizontal
from widgets.dgraph_header import DgraphHeader
from validators import Validator, always_valid
from logger import log


class QuestionScreen(Screen):
    """Free-text question; the raw answer is validated before dismissing."""

    AUTO_FOCUS = "#inp_answer"

    def __init__(
        self,
        message: str,
        default: str = "",
        validator: Validator = always_valid,
    ) -> None:
        super().__init__()
        self.question = message
        self._default = default
        self._validator = validator

    def compose(self) -> ComposeResult:
        yield DgraphHeader()
        with Vertical(id="content"):
            yield Static(self.question, classes="title", id="question", markup=False)
            yield Input(value=self._default, id="inp_answer")
            yield Static("", id="err_msg")
        with Horizontal(id="nav_buttons"):
            yield Button("Next →", id="btn_next", variant="primary")
        yield Footer()

    def _submit(self) -> None:
        answer = self.query_one("#inp_answer", Input).value
        ok, msg = self._validator(answer)
        if not ok:
            log.info("Rejected answer %r for %r: %s", answer, self.question, msg)
            self._show_error(msg)
            return
        log.info("Answer for %r: %r", self.question, answer)
        self.dismiss(answer)

    def _show_error(self, msg: str) -> None:
        self.query_one("#err_msg", Static).update(f"[red]Error: {escape(msg)}[/red]")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn_next":
            self._submit()
