# prompter.py
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

from validators import Validator, always_valid, parse_float, parse_int


class Prompter(ABC):
    """Questions the wizard can ask, independent of the terminal toolkit."""

    @abstractmethod
    async def ask_string(
        self, message: str, default: str = "", validator: Validator = always_valid
    ) -> str: ...

    @abstractmethod
    async def ask_integer(
        self, message: str, default: int, validator: Validator
    ) -> int: ...

    @abstractmethod
    async def ask_float(
        self, message: str, default: float, validator: Validator
    ) -> float: ...

    @abstractmethod
    async def ask_yes_no(self, message: str, default: bool) -> bool: ...

    @abstractmethod
    async def ask_multi_select(
        self, message: str, start: int, count: int
    ) -> List[int]:
        """Pick one or more integers from range(start, start + count)."""

    @abstractmethod
    async def confirm_table(
        self,
        message: str,
        headers: Sequence[str],
        rows: Sequence[Tuple[str, ...]],
        default: bool = True,
    ) -> bool: ...


class TextualPrompter(Prompter):
    """Each question is a screen pushed onto the app; answers come back on dismiss.

    Must be used from inside a Textual worker (push_screen_wait requirement).
    """

    def __init__(self, app) -> None:
        self.app = app

    async def _ask_text(self, message: str, default: str, validator: Validator) -> str:
        from screens.question import QuestionScreen
        return await self.app.push_screen_wait(
            QuestionScreen(message, default=default, validator=validator)
        )

    async def ask_string(
        self, message: str, default: str = "", validator: Validator = always_valid
    ) -> str:
        return await self._ask_text(message, default, validator)

    async def ask_integer(self, message: str, default: int, validator: Validator) -> int:
        answer = await self._ask_text(message, str(default), validator)
        return parse_int(answer)

    async def ask_float(self, message: str, default: float, validator: Validator) -> float:
        answer = await self._ask_text(message, f"{default:.2f}", validator)
        return parse_float(answer)

    async def ask_yes_no(self, message: str, default: bool) -> bool:
        from screens.yes_no import YesNoScreen
        return await self.app.push_screen_wait(YesNoScreen(message, default=default))

    async def ask_multi_select(self, message: str, start: int, count: int) -> List[int]:
        from screens.multi_select import MultiSelectScreen
        return await self.app.push_screen_wait(
            MultiSelectScreen(message, list(range(start, start + count)))
        )

    async def confirm_table(
        self,
        message: str,
        headers: Sequence[str],
        rows: Sequence[Tuple[str, ...]],
        default: bool = True,
    ) -> bool:
        from screens.confirm import ConfirmScreen
        return await self.app.push_screen_wait(
            ConfirmScreen(message, headers, rows, default=default)
        )
