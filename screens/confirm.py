# screens/confirm.py
from __future__ import annotations
from typing import Sequence, Tuple
from textual.app import ComposeResult
from textual.widgets import DataTable
from screens.yes_no import YesNoScreen


class ConfirmScreen(YesNoScreen):
    """Final summary table followed by the proceed question."""

    def __init__(
        self,
        message: str,
        headers: Sequence[str],
        rows: Sequence[Tuple[str, ...]],
        default: bool = True,
    ) -> None:
        super().__init__(message, default=default)
        self._headers = list(headers)
        self._rows = [tuple(r) for r in rows]

    def compose_details(self) -> ComposeResult:
        yield DataTable(id="summary_table", show_cursor=False)

    def on_mount(self) -> None:
        table = self.query_one("#summary_table", DataTable)
        table.add_columns(*self._headers)
        for row in self._rows:
            table.add_row(*row)
