"""
Unit tests for the Textual front end.
"""

import pytest

from dbca_wizard.config import Settings
from dbca_wizard.tui import create_app
from dbca_wizard.tui.screens.wizard import StepView
from dbca_wizard.wizard import DBConfig


@pytest.mark.asyncio
async def test_starts_on_first_step():
    app = create_app()
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.wizard.current_step.title() == "Select Operation"
        assert app.screen.query_one(StepView).has_focus
        assert "Create a Database" in app.wizard.current_step.render().plain


@pytest.mark.asyncio
async def test_ctrl_c_cancels():
    app = create_app()
    async with app.run_test() as pilot:
        await pilot.press("enter")
        assert app.wizard.current_step.title() == "Database Creation Mode"
        await pilot.press("ctrl+c")

    outcome = app.return_value
    assert outcome is not None
    assert outcome.completed is False
    assert outcome.cancelled is True
    assert outcome.print_requested is False


@pytest.mark.asyncio
async def test_q_on_first_step_quits():
    app = create_app()
    async with app.run_test() as pilot:
        await pilot.press("q")

    assert app.return_value.completed is False


@pytest.mark.asyncio
async def test_delete_and_print():
    app = create_app()
    async with app.run_test() as pilot:
        await pilot.press("down", "enter")
        assert app.wizard.current_step.title() == "Delete Database"

        await pilot.press("o", "l", "d", "tab", *"secret12", "enter")
        assert app.wizard.current_step.title() == "Review"

        await pilot.press("p")

    outcome = app.return_value
    assert outcome.print_requested is True
    assert outcome.config.delete_sid == "old"
    assert outcome.config.sys_password == "secret12"


@pytest.mark.asyncio
async def test_seeded_config_and_settings():
    settings = Settings.model_validate({"ui": {"show_progress": False}})
    app = create_app(DBConfig(creation_mode="advanced"), settings)
    async with app.run_test() as pilot:
        await pilot.press("enter", "enter")
        assert app.wizard.current_config().creation_mode == "advanced"
        assert app.wizard.current_step.title() == "Deployment Type"
        await pilot.press("ctrl+c")


@pytest.mark.asyncio
async def test_ctrl_c_after_completion_is_a_cancel():
    app = create_app()
    async with app.run_test() as pilot:
        await pilot.press("down", "enter", "o", "l", "d", "tab", *"secret12", "enter", "enter")
        assert app.wizard.is_completed()
        await pilot.press("ctrl+c")

    outcome = app.return_value
    assert outcome.completed is True
    assert outcome.cancelled is True


@pytest.mark.asyncio
async def test_enter_after_completion_finishes():
    app = create_app()
    async with app.run_test() as pilot:
        await pilot.press("down", "enter", "o", "l", "d", "tab", *"secret12", "enter", "enter")
        await pilot.press("enter")

    outcome = app.return_value
    assert outcome.completed is True
    assert outcome.cancelled is False
