# app.py
from textual import work
from textual.app import App
from state import DgraphConfig
from prompter import TextualPrompter
from wizard import Wizard
from logger import log


class DgraphWizard(App):
    """dgraph_helper install wizard. Exits with the confirmed config or None."""

    CSS = """
    Screen {
        background: $surface;
    }
    .title {
        text-style: bold;
        color: $accent;
        margin-bottom: 1;
    }
    #content {
        margin: 1 2;
        height: auto;
    }
    #nav_buttons {
        dock: bottom;
        height: 3;
        align: center middle;
        margin: 1 2;
    }
    Button {
        margin: 0 1;
    }
    #err_msg {
        margin-top: 1;
        color: $error;
    }
    DataTable {
        height: auto;
        max-height: 20;
    }
    SelectionList {
        height: auto;
        max-height: 15;
        border: solid $primary;
    }
    Input {
        margin-bottom: 1;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self.state = DgraphConfig()
        log.info("DgraphWizard started")

    def on_mount(self) -> None:
        self.run_flow()

    @work(exclusive=True)
    async def run_flow(self) -> None:
        result = await Wizard(TextualPrompter(self), self.state).run()
        self.exit(result)
