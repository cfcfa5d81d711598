# tests/conftest.py
import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from typing import List

import pytest
from prompter import Prompter
from state import DgraphConfig
from validators import parse_float, parse_int


class ScriptedPrompter(Prompter):
    """
    Answers questions from a fixed script, in order.

    Text answers are run through the question's validator; rejected answers
    are recorded and the next scripted answer is tried, like an operator
    retyping at the prompt.
    """

    def __init__(self, answers):
        self.answers = list(answers)
        self.asked: List[str] = []
        self.rejected: List[tuple] = []
        self.table = None

    def _next(self, message):
        self.asked.append(message)
        if not self.answers:
            raise AssertionError(f"No scripted answer left for {message!r}")
        return self.answers.pop(0)

    def _next_valid(self, message, validator):
        while True:
            raw = str(self._next(message))
            ok, msg = validator(raw)
            if ok:
                return raw
            self.rejected.append((message, raw, msg))

    async def ask_string(self, message, default="", validator=lambda s: (True, "")):
        return self._next_valid(message, validator)

    async def ask_integer(self, message, default, validator):
        return parse_int(self._next_valid(message, validator))

    async def ask_float(self, message, default, validator):
        return parse_float(self._next_valid(message, validator))

    async def ask_yes_no(self, message, default):
        return bool(self._next(message))

    async def ask_multi_select(self, message, start, count):
        return list(self._next(message))

    async def confirm_table(self, message, headers, rows, default=True):
        self.table = (list(headers), [tuple(r) for r in rows])
        return bool(self._next(message))


@pytest.fixture
def cfg():
    return DgraphConfig()


@pytest.fixture
def scripted():
    return ScriptedPrompter
