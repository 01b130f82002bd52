"""Textual front end for the alias menu"""

import asyncio
import logging
import signal
from typing import Optional

from textual import events
from textual.app import App, ComposeResult, SuspendNotSupported
from textual.containers import Container
from textual.widgets import Static

from tuish.config import ConfigStore
from tuish.launcher import ShellLauncher
from tuish.machine import MenuStateMachine
from tuish.modes import Message
from tuish.render import Render

logger = logging.getLogger(__name__)

EXIT_SIGNALS = (signal.SIGTERM, signal.SIGHUP) if hasattr(signal, "SIGHUP") else (signal.SIGTERM,)


class MenuView(Container):
    """Main panels. Holds focus so every key press lands here."""

    can_focus = True

    def on_key(self, event: events.Key) -> None:
        # Keep Textual's own bindings (tab focus cycling etc.) out of the way
        event.stop()
        event.prevent_default()
        character = event.character if event.is_printable else None
        self.app.dispatch_menu_key(event.key, character)


class TuishApp(App):
    """Alias launcher menu"""

    # Every key goes to the menu; quitting is the "Quit shell" action
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        layers: base overlay;
        background: $surface-darken-2;
    }

    #menu {
        layout: vertical;
        height: 1fr;
        margin: 1;
    }

    #header {
        height: 1;
    }

    #aliases {
        height: 1fr;
        border: solid $primary-lighten-3;
        border-title-color: $text;
    }

    #actions {
        height: 7;
        border: solid green;
        border-title-color: green;
    }

    #popup {
        layer: overlay;
        dock: top;
        display: none;
        height: auto;
        background: $surface;
        border: solid $secondary;
    }

    #popup.message {
        border: solid red;
    }

    #warning {
        layer: overlay;
        dock: top;
        display: none;
        margin: 2 2;
    }
    """

    def __init__(self, config_store: Optional[ConfigStore] = None,
                 launcher: Optional[ShellLauncher] = None):
        super().__init__()
        self.config_store = config_store or ConfigStore()
        self.painter = Render()
        self.machine = MenuStateMachine(
            self.config_store.load(),
            self.config_store,
            launcher or ShellLauncher(suspend=self.suspend),
        )

    def compose(self) -> ComposeResult:
        with MenuView(id="menu"):
            yield Static(id="header")
            yield Static(id="aliases")
            yield Static(id="actions")
        yield Static(id="popup")
        yield Static(id="warning")

    def on_mount(self) -> None:
        self.query_one("#aliases", Static).border_title = "Aliases"
        self.query_one("#actions", Static).border_title = "Actions"
        self.query_one("#header", Static).update(self.painter.header())
        self.query_one("#warning", Static).update(self.painter.too_small())
        self.query_one(MenuView).focus()
        self._install_signal_handlers()
        self.machine.resize(self.size.width, self.size.height)
        self.refresh_view()

    def on_unmount(self) -> None:
        loop = asyncio.get_running_loop()
        try:
            for sig in EXIT_SIGNALS:
                loop.remove_signal_handler(sig)
        except NotImplementedError:
            pass

    def _install_signal_handlers(self) -> None:
        # Exit through App.exit so Textual restores the terminal
        loop = asyncio.get_running_loop()
        try:
            for sig in EXIT_SIGNALS:
                loop.add_signal_handler(sig, self.exit)
        except NotImplementedError:
            # Windows event loops have no signal handler support
            pass

    def on_resize(self, event: events.Resize) -> None:
        self.machine.resize(event.size.width, event.size.height)
        self.refresh_view()

    async def action_quit(self) -> None:
        """Ignore Textual's ctrl+q, the menu only exits from Main"""

    def dispatch_menu_key(self, key: str, character: Optional[str]) -> None:
        try:
            self.machine.handle_key(key, character)
        except SuspendNotSupported:
            logger.warning("Cannot suspend the UI to run a command in this environment")
            self.notify("Cannot suspend in this environment", severity="error")
        if self.machine.exit_requested:
            self.exit()
            return
        self.refresh_view()

    def refresh_view(self) -> None:
        """Redraw every panel from the machine state"""
        menu = self.query_one(MenuView)
        warning = self.query_one("#warning", Static)
        popup = self.query_one("#popup", Static)

        if self.machine.too_small:
            menu.display = False
            popup.display = False
            warning.display = True
            return
        menu.display = True
        warning.display = False
        if not menu.has_focus:
            menu.focus()

        aliases = self.query_one("#aliases", Static)
        aliases.update(self.painter.aliases(self.machine, aliases.content_size.height))
        self.query_one("#actions", Static).update(self.painter.actions(self.machine))

        width, height = self.machine.size or (self.size.width, self.size.height)
        content = self.painter.popup(self.machine, max(height // 3, 3))
        if content is None:
            popup.display = False
            return
        title, body = content
        popup.border_title = title
        popup.set_class(isinstance(self.machine.mode, Message), "message")
        popup.styles.width = max(width * 2 // 3, 20)
        popup.styles.offset = (width // 6, height // 3)
        popup.update(body)
        popup.display = True
