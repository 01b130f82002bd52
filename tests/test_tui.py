import json
from unittest.mock import patch

import pytest
from textual.widgets import Static

from tuish.config import Config
from tuish.models import Alias
from tuish.modes import Adding, Focus, Main
from tuish.tui import MenuView, TuishApp


@pytest.fixture
def make_app(config_store, launcher):
    def _make(aliases=None) -> TuishApp:
        config_store.save(Config(aliases=dict(aliases or {}), default_shell="/bin/bash"))
        return TuishApp(config_store, launcher=launcher)

    return _make


@pytest.mark.asyncio
async def test_add_alias(make_app, config_file):
    app = make_app()

    async with app.run_test(size=(80, 24)) as pilot:
        assert isinstance(app.focused, MenuView)

        await pilot.press("enter")
        await pilot.press(*list("build"))
        await pilot.press("enter")
        await pilot.press(*list("cargo build"))
        await pilot.press("enter")
        await pilot.press("b", "enter")
        await pilot.pause()

        assert isinstance(app.machine.mode, Main)
        assert app.machine.store.list_all() == [Alias("build", "cargo build", "b")]

    assert json.loads(config_file.read_text())["aliases"] == {
        "build": {"command": "cargo build", "keybind": "b"}
    }


@pytest.mark.asyncio
async def test_keybind_runs_alias(make_app, launcher):
    app = make_app({"build": Alias("build", "cargo build", "b")})

    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.press("b")
        await pilot.pause()

    launcher.run_interactive.assert_called_once_with("cargo build", "/bin/bash")


@pytest.mark.asyncio
async def test_tab_switches_focus(make_app, launcher):
    app = make_app({
        "build": Alias("build", "cargo build", "b"),
        "test": Alias("test", "cargo test"),
    })

    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.press("tab")
        assert app.machine.focus is Focus.ALIASES
        # Focus stays on the menu instead of cycling widgets
        assert isinstance(app.focused, MenuView)

        await pilot.press("down", "enter")
        await pilot.pause()

    launcher.run_interactive.assert_called_once_with("cargo test", "/bin/bash")


@pytest.mark.asyncio
async def test_popup_follows_mode(make_app):
    app = make_app()

    async with app.run_test(size=(80, 24)) as pilot:
        popup = app.query_one("#popup", Static)
        assert popup.display is False

        await pilot.press("enter")
        assert isinstance(app.machine.mode, Adding)
        assert popup.display is True
        assert popup.border_title == "Add alias"

        await pilot.press("escape")
        assert popup.display is False


@pytest.mark.asyncio
async def test_no_aliases_to_remove_message(make_app):
    app = make_app()

    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.press("down", "down", "enter")
        popup = app.query_one("#popup", Static)
        assert popup.border_title == "Info"
        assert popup.has_class("message")

        await pilot.press("x")
        assert isinstance(app.machine.mode, Main)
        assert popup.display is False


@pytest.mark.asyncio
async def test_quit(make_app):
    app = make_app()

    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.press("up", "enter")
        await pilot.pause()

        assert app.machine.exit_requested is True


@pytest.mark.asyncio
async def test_too_small_terminal(make_app, launcher):
    app = make_app({"build": Alias("build", "cargo build", "b")})

    async with app.run_test(size=(30, 8)) as pilot:
        assert app.machine.too_small
        assert app.query_one("#warning", Static).display is True
        assert app.query_one(MenuView).display is False

        await pilot.press("enter", "b")
        await pilot.pause()

        assert isinstance(app.machine.mode, Main)
        launcher.run_interactive.assert_not_called()


@pytest.mark.asyncio
async def test_ctrl_q_does_not_quit(make_app):
    app = make_app()

    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.press("enter", "x")
        await pilot.press("ctrl+q")
        await pilot.pause()

        assert app.is_running
        assert app.machine.mode == Adding(step=1, name="x")


@pytest.mark.asyncio
async def test_no_command_palette(make_app):
    app = make_app()

    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.press("ctrl+p")
        await pilot.press("enter")
        await pilot.pause()

        assert len(app.screen_stack) == 1
        assert isinstance(app.machine.mode, Adding)


@pytest.mark.asyncio
@patch("tuish.launcher.subprocess.run")
@patch.object(TuishApp, "notify")
async def test_launch_without_suspend_support(mock_notify, mock_run, config_store):
    config_store.save(Config(
        aliases={"ok": Alias("ok", "true", "e")}, default_shell="/bin/sh",
    ))
    # Default launcher suspends through the app; the headless driver cannot
    app = TuishApp(config_store)

    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.press("e")
        await pilot.pause()

        assert app.is_running
        assert isinstance(app.machine.mode, Main)
        mock_notify.assert_called_once_with(
            "Cannot suspend in this environment", severity="error"
        )

    mock_run.assert_not_called()
