"""Keyboard-driven state machine behind the tuish menu.

The machine owns the alias store, both cursors, the focus and the current
mode. The UI feeds it key presses and terminal sizes and draws whatever
state it ends up in; nothing here knows about Textual.
"""

import logging
from typing import Optional

from tuish import selection
from tuish.config import Config, ConfigStore
from tuish.launcher import ShellLauncher
from tuish.modes import (
    ACTIONS,
    STEP_COMMAND,
    STEP_KEYBIND,
    STEP_NAME,
    Action,
    Adding,
    Editing,
    EditingSelect,
    Focus,
    InteractionMode,
    Main,
    Message,
    RemovingSelect,
)
from tuish.storage import AliasStore

logger = logging.getLogger(__name__)

MIN_WIDTH = 40
MIN_HEIGHT = 10

KEY_UP = "up"
KEY_DOWN = "down"
KEY_ENTER = "enter"
KEY_ESCAPE = "escape"
KEY_BACKSPACE = "backspace"
KEY_TAB = "tab"

NO_ALIASES_TO_REMOVE = "No aliases to remove"


class MenuStateMachine:
    """Mode/focus state machine driven one key press at a time"""

    def __init__(self, config: Config, persistence: ConfigStore, launcher: ShellLauncher):
        self.store = AliasStore.from_mapping(config.aliases)
        self.default_shell = config.default_shell
        self.persistence = persistence
        self.launcher = launcher

        self.mode: InteractionMode = Main()
        self.focus = Focus.ACTIONS
        self.action_cursor = 0
        self.cursor: Optional[int] = selection.ensure(len(self.store), None)
        self.exit_requested = False
        self.size: Optional[tuple] = None

    # State queries used by the renderer

    @property
    def too_small(self) -> bool:
        if self.size is None:
            return False
        width, height = self.size
        return width < MIN_WIDTH or height < MIN_HEIGHT

    @property
    def selected_action(self) -> Action:
        return ACTIONS[self.action_cursor]

    def to_config(self) -> Config:
        return Config(aliases=self.store.to_mapping(), default_shell=self.default_shell)

    # Events

    def resize(self, width: int, height: int) -> None:
        """Record the terminal size. Never changes the mode."""
        self.size = (width, height)

    def handle_key(self, key: str, character: Optional[str] = None) -> None:
        """Dispatch one key press.

        `key` is the key name ("up", "enter", "b", ...); `character` is the
        printable character it produces, or None.
        """
        if self.too_small or self.exit_requested:
            return

        before = self.mode
        if key == KEY_TAB:
            self._toggle_focus()
        elif isinstance(self.mode, Main):
            if self.focus is Focus.ACTIONS:
                self._main_actions(key, character)
            else:
                self._main_aliases(key)
        elif isinstance(self.mode, Adding):
            self._adding(self.mode, key, character)
        elif isinstance(self.mode, EditingSelect):
            self._editing_select(key)
        elif isinstance(self.mode, Editing):
            self._editing(self.mode, key, character)
        elif isinstance(self.mode, RemovingSelect):
            self._removing_select(key)
        elif isinstance(self.mode, Message):
            self.mode = Main()

        if type(self.mode) is not type(before):
            logger.debug("Mode %s -> %s on %r", type(before).__name__, type(self.mode).__name__, key)

    # Helpers

    def _persist(self) -> None:
        self.persistence.save(self.to_config())

    def _run_selected(self) -> None:
        if self.cursor is None:
            return
        alias = self.store.get(self.cursor)
        self.launcher.run_interactive(alias.command, self.default_shell)

    def _move_cursor(self, key: str) -> None:
        if key == KEY_UP:
            self.cursor = selection.move_up(len(self.store), self.cursor)
        elif key == KEY_DOWN:
            self.cursor = selection.move_down(len(self.store), self.cursor)

    def _toggle_focus(self) -> None:
        # Focus only matters while browsing
        if not isinstance(self.mode, Main):
            return
        self.focus = self.focus.toggled()
        if self.focus is Focus.ALIASES:
            self.cursor = selection.ensure(len(self.store), self.cursor)

    # Per-mode handlers

    def _main_actions(self, key: str, character: Optional[str]) -> None:
        if key == KEY_UP:
            self.action_cursor = selection.move_up(len(ACTIONS), self.action_cursor)
        elif key == KEY_DOWN:
            self.action_cursor = selection.move_down(len(ACTIONS), self.action_cursor)
        elif key == KEY_ENTER:
            self._activate(self.selected_action)
        elif character:
            alias = self.store.find_by_keybind(character)
            if alias is not None:
                self.launcher.run_interactive(alias.command, self.default_shell)

    def _activate(self, action: Action) -> None:
        if action is Action.ADD:
            self.mode = Adding()
        elif action is Action.EDIT:
            if len(self.store):
                self.cursor = selection.ensure(len(self.store), self.cursor)
                self.mode = EditingSelect()
        elif action is Action.REMOVE:
            if len(self.store):
                self.cursor = selection.ensure(len(self.store), self.cursor)
                self.mode = RemovingSelect()
            else:
                self.mode = Message(NO_ALIASES_TO_REMOVE)
        elif action is Action.SHELL:
            self.launcher.run_interactive(None, self.default_shell)
        elif action is Action.QUIT:
            logger.info("Quit requested")
            self.exit_requested = True

    def _main_aliases(self, key: str) -> None:
        if key in (KEY_UP, KEY_DOWN):
            self._move_cursor(key)
        elif key == KEY_ENTER:
            self._run_selected()

    def _adding(self, mode: Adding, key: str, character: Optional[str]) -> None:
        if key == KEY_ESCAPE:
            self.mode = Main()
        elif key == KEY_ENTER:
            if mode.step < STEP_KEYBIND:
                mode.step += 1
            else:
                self.store.add(mode.name, mode.command, mode.keybind)
                self._persist()
                self.cursor = selection.after_insert(len(self.store))
                logger.info("Added alias %r", mode.name)
                self.mode = Main()
        elif key == KEY_BACKSPACE:
            if mode.step == STEP_NAME:
                mode.name = mode.name[:-1]
            elif mode.step == STEP_COMMAND:
                mode.command = mode.command[:-1]
        elif character:
            if mode.step == STEP_NAME:
                mode.name += character
            elif mode.step == STEP_COMMAND:
                mode.command += character
            else:
                mode.keybind = character

    def _editing_select(self, key: str) -> None:
        if key in (KEY_UP, KEY_DOWN):
            self._move_cursor(key)
        elif key == KEY_ENTER:
            if self.cursor is not None:
                alias = self.store.get(self.cursor)
                self.mode = Editing(index=self.cursor, command=alias.command)
        elif key == KEY_ESCAPE:
            self.mode = Main()

    def _editing(self, mode: Editing, key: str, character: Optional[str]) -> None:
        if key == KEY_ESCAPE:
            self.mode = Main()
        elif key == KEY_ENTER:
            alias = self.store.update_command(mode.index, mode.command)
            self._persist()
            logger.info("Updated alias %r", alias.name)
            self.mode = Main()
        elif key == KEY_BACKSPACE:
            mode.command = mode.command[:-1]
        elif character:
            mode.command += character

    def _removing_select(self, key: str) -> None:
        if not len(self.store):
            self.mode = Main()
            return
        if key in (KEY_UP, KEY_DOWN):
            self._move_cursor(key)
        elif key == KEY_ENTER:
            if self.cursor is not None:
                alias = self.store.remove(self.cursor)
                self._persist()
                self.cursor = selection.after_remove(len(self.store), self.cursor)
                logger.info("Removed alias %r", alias.name)
                self.mode = Main()
        elif key == KEY_ESCAPE:
            self.mode = Main()
