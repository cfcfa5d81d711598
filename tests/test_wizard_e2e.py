# tests/test_wizard_e2e.py
"""
End-to-end headless Pilot tests for the dgraph_helper wizard.

The wizard itself never touches the host; installation happens after the
app exits. run_command is still patched so any stray call is caught.
"""
from __future__ import annotations

from unittest.mock import patch

import pytest
from textual.widgets import DataTable, Input, SelectionList, Static


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def _wait_for_question(pilot, question: str, tries: int = 30):
    """Wait until the top screen asks `question` and return it."""
    for _ in range(tries):
        screen = pilot.app.screen
        if getattr(screen, "question", None) == question:
            return screen
        await pilot.pause(0.1)
    pytest.fail(
        f"Expected question {question!r}, got "
        f"{getattr(pilot.app.screen, 'question', type(pilot.app.screen).__name__)!r}"
    )


async def _answer(pilot, question: str, yes: bool) -> None:
    await _wait_for_question(pilot, question)
    await pilot.click("#btn_yes" if yes else "#btn_no")
    await pilot.pause(0.1)


async def _type(pilot, question: str, value: str) -> None:
    screen = await _wait_for_question(pilot, question)
    screen.query_one("#inp_answer", Input).value = value
    await pilot.click("#btn_next")
    await pilot.pause(0.1)


GATES = [
    "Change dgraph's base directory? [/var/lib/dgraph]",
    "Change dgraph's subdirectories?",
    "Change dgraph's ports config?",
    "Change dgraph's engine config?",
    "Change dgraph's cluster config?",
]


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_first_screen_is_install_dir_gate():
    from app import DgraphWizard

    app = DgraphWizard()
    async with app.run_test(headless=True, size=(120, 40)) as pilot:
        screen = await _wait_for_question(pilot, GATES[0])
        await pilot.pause(0.1)
        assert type(screen).__name__ == "YesNoScreen"
        # gates default to "no"
        assert screen.focused.id == "btn_no"


@pytest.mark.asyncio
async def test_declining_everything_installs_nothing():
    from app import DgraphWizard

    with patch("system.commands.subprocess.run") as fake_run:
        app = DgraphWizard()
        async with app.run_test(headless=True, size=(120, 40)) as pilot:
            for gate in GATES:
                await _answer(pilot, gate, yes=False)
            screen = await _wait_for_question(pilot, "Proceed with install?")
            assert type(screen).__name__ == "ConfirmScreen"
            await pilot.click("#btn_no")
            await pilot.pause(0.3)

    assert app.return_value is None
    fake_run.assert_not_called()


@pytest.mark.asyncio
async def test_confirming_defaults_returns_config():
    from app import DgraphWizard

    app = DgraphWizard()
    async with app.run_test(headless=True, size=(120, 40)) as pilot:
        for gate in GATES:
            await _answer(pilot, gate, yes=False)
        screen = await _wait_for_question(pilot, "Proceed with install?")
        table = screen.query_one("#summary_table", DataTable)
        assert table.row_count == 14
        await pilot.pause(0.1)
        assert screen.focused.id == "btn_yes"
        await pilot.click("#btn_yes")
        await pilot.pause(0.3)

    cfg = app.return_value
    assert cfg is app.state
    assert cfg.p == "/var/lib/dgraph/p"
    assert cfg.port == 8080


@pytest.mark.asyncio
async def test_keyboard_answers_gates():
    from app import DgraphWizard

    app = DgraphWizard()
    async with app.run_test(headless=True, size=(120, 40)) as pilot:
        for gate in GATES:
            await _wait_for_question(pilot, gate)
            await pilot.press("n")
            await pilot.pause(0.1)
        await _wait_for_question(pilot, "Proceed with install?")
        await pilot.press("y")
        await pilot.pause(0.3)

    assert app.return_value is not None


@pytest.mark.asyncio
async def test_invalid_port_is_reasked_inline():
    from app import DgraphWizard

    app = DgraphWizard()
    async with app.run_test(headless=True, size=(120, 40)) as pilot:
        await _answer(pilot, GATES[0], yes=False)
        await _answer(pilot, GATES[1], yes=False)
        await _answer(pilot, GATES[2], yes=True)

        screen = await _wait_for_question(pilot, "The port to serve http?")
        assert screen.query_one("#inp_answer", Input).value == "8080"
        screen.query_one("#inp_answer", Input).value = "70000"
        await pilot.click("#btn_next")
        await pilot.pause(0.2)

        assert pilot.app.screen is screen
        err = str(screen.query_one("#err_msg", Static).render())
        assert "65535" in err

        await _type(pilot, "The port to serve http?", "8000")
        await _type(pilot, "The port to serve grpc?", "9000")
        await _type(pilot, "The port for worker communication?", "7000")
        await _answer(pilot, GATES[3], yes=False)
        await _answer(pilot, GATES[4], yes=False)
        await _answer(pilot, "Proceed with install?", yes=True)

    cfg = app.return_value
    assert (cfg.port, cfg.grpc_port, cfg.workerport) == (8000, 9000, 7000)


@pytest.mark.asyncio
async def test_cluster_menu_requires_a_selection():
    from app import DgraphWizard

    app = DgraphWizard()
    async with app.run_test(headless=True, size=(120, 40)) as pilot:
        for gate in GATES[:4]:
            await _answer(pilot, gate, yes=False)
        await _answer(pilot, GATES[4], yes=True)
        await _type(pilot, "RAFT ID that this server will use to join RAFT groups?", "1")
        await _answer(pilot, "Is this the first server in the cluster?", yes=True)
        await _type(pilot, "The total number of groups?", "3")

        question = "Select the groups (must choose at least one option)"
        screen = await _wait_for_question(pilot, question)
        assert type(screen).__name__ == "MultiSelectScreen"
        await pilot.click("#btn_next")
        await pilot.pause(0.2)
        assert pilot.app.screen is screen
        assert "at least one" in str(screen.query_one("#err_msg", Static).render())

        options = screen.query_one("#option_list", SelectionList)
        options.select(2)
        options.select(0)
        await pilot.click("#btn_next")
        await pilot.pause(0.1)

        await _type(pilot, "The IP of this server?", "10.0.0.7")
        await _answer(pilot, "Proceed with install?", yes=True)

    cfg = app.return_value
    assert cfg.bindall is True
    assert cfg.groups == "0,2"
    assert cfg.my == "10.0.0.7:12345"


@pytest.mark.asyncio
async def test_padded_port_is_rejected_as_typed():
    from app import DgraphWizard

    app = DgraphWizard()
    async with app.run_test(headless=True, size=(120, 40)) as pilot:
        await _answer(pilot, GATES[0], yes=False)
        await _answer(pilot, GATES[1], yes=False)
        await _answer(pilot, GATES[2], yes=True)

        screen = await _wait_for_question(pilot, "The port to serve http?")
        screen.query_one("#inp_answer", Input).value = " 80"
        await pilot.click("#btn_next")
        await pilot.pause(0.2)

        assert pilot.app.screen is screen
        assert "port" in str(screen.query_one("#err_msg", Static).render()).lower()
