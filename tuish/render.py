"""Turn machine state into rich renderables for the Textual widgets"""

from typing import List, Optional, Tuple

from rich.text import Text

from tuish.machine import MIN_HEIGHT, MIN_WIDTH, MenuStateMachine
from tuish.modes import (
    ACTIONS,
    STEP_COMMAND,
    STEP_NAME,
    Adding,
    Editing,
    EditingSelect,
    Focus,
    Message,
    RemovingSelect,
)

HIGHLIGHT = "bold yellow"
ALIAS_MARKER = "-> "
ACTION_MARKER = "> "


def visible_window(count: int, cursor: Optional[int], rows: int) -> Tuple[int, int]:
    """Slice [start, end) of a list of count items that keeps cursor in view.

    rows <= 0 means the height is not known yet and everything is shown.
    """
    if rows <= 0 or count <= rows:
        return 0, count
    start = 0
    if cursor is not None and cursor >= rows:
        start = cursor - rows + 1
    return start, start + rows


class Render:
    """Builds the text for each panel from a MenuStateMachine"""

    def header(self) -> Text:
        return Text("tuish", style="bold magenta")

    def too_small(self) -> Text:
        return Text(
            f"Terminal too small - need at least {MIN_WIDTH}x{MIN_HEIGHT}",
            style="bold red",
        )

    def _list(self, labels: List[str], cursor: Optional[int], marker: str,
              style: str, highlight: str, rows: int = 0) -> Text:
        start, end = visible_window(len(labels), cursor, rows)
        lines = []
        pad = " " * len(marker)
        for i in range(start, end):
            if i == cursor:
                lines.append(Text(marker + labels[i], style=highlight))
            else:
                lines.append(Text(pad + labels[i], style=style))
        return Text("\n").join(lines)

    def aliases(self, machine: MenuStateMachine, rows: int = 0) -> Text:
        if not len(machine.store):
            return Text("(no aliases)", style="bright_black")
        focused = machine.focus is Focus.ALIASES
        return self._list(
            [alias.label() for alias in machine.store],
            machine.cursor,
            ALIAS_MARKER,
            style="cyan",
            highlight=HIGHLIGHT if focused else "cyan",
            rows=rows,
        )

    def actions(self, machine: MenuStateMachine) -> Text:
        focused = machine.focus is Focus.ACTIONS
        return self._list(
            [action.value for action in ACTIONS],
            machine.action_cursor,
            ACTION_MARKER,
            style="white",
            highlight=HIGHLIGHT if focused else "white",
        )

    def popup(self, machine: MenuStateMachine, rows: int = 0) -> Optional[Tuple[str, Text]]:
        """Title and body of the popup for the current mode, or None in Main"""
        mode = machine.mode
        if isinstance(mode, Adding):
            if mode.step == STEP_NAME:
                field = f"Name: {mode.name}"
            elif mode.step == STEP_COMMAND:
                field = f"Command: {mode.command}"
            else:
                field = f"Keybind (single char, or empty): {mode.keybind or ''}"
            return "Add alias", Text(f"Step {mode.step}\n{field}")
        if isinstance(mode, Editing):
            alias = machine.store.get(mode.index)
            return f"Edit command for: {alias.name}", Text(mode.command)
        if isinstance(mode, (EditingSelect, RemovingSelect)):
            verb = "edit" if isinstance(mode, EditingSelect) else "remove"
            body = self._list(
                [f"{alias.name} - {alias.command}" for alias in machine.store],
                machine.cursor,
                ACTION_MARKER,
                style="white",
                highlight=HIGHLIGHT,
                rows=rows,
            )
            return f"Select alias to {verb}", body
        if isinstance(mode, Message):
            return "Info", Text(mode.text, style="bold red")
        return None
