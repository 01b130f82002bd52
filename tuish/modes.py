"""Interaction modes and focus for the menu state machine"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

# Adding steps
STEP_NAME = 1
STEP_COMMAND = 2
STEP_KEYBIND = 3


class Focus(Enum):
    """Panel receiving directional input while browsing"""

    ACTIONS = "actions"
    ALIASES = "aliases"

    def toggled(self) -> "Focus":
        return Focus.ALIASES if self is Focus.ACTIONS else Focus.ACTIONS


class Action(Enum):
    """Entries of the fixed actions menu, in display order"""

    ADD = "Add an alias"
    EDIT = "Edit an alias"
    REMOVE = "Remove an alias"
    SHELL = "Go to shell"
    QUIT = "Quit shell"


ACTIONS = list(Action)


@dataclass
class Main:
    """Browsing the actions menu or the alias list"""


@dataclass
class Adding:
    """Three-step alias entry: name, command, keybind"""
    step: int = STEP_NAME
    name: str = ""
    command: str = ""
    keybind: Optional[str] = None


@dataclass
class EditingSelect:
    """Choosing which alias to edit"""


@dataclass
class Editing:
    """Editing the command of the alias at index"""
    index: int
    command: str


@dataclass
class RemovingSelect:
    """Choosing which alias to remove"""


@dataclass
class Message:
    """Informational popup, dismissed by any key"""
    text: str


InteractionMode = Union[Main, Adding, EditingSelect, Editing, RemovingSelect, Message]
