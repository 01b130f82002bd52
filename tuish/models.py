"""Data models for aliases"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Alias:
    """Represents a named shell command with an optional hotkey"""
    name: str
    command: str
    keybind: Optional[str] = None  # single character

    def to_dict(self) -> dict:
        """Convert alias to the on-disk entry (the name is the mapping key)"""
        return {
            "command": self.command,
            "keybind": self.keybind,
        }

    @classmethod
    def from_dict(cls, name: str, data: dict) -> "Alias":
        """Create alias from an on-disk entry"""
        command = data["command"]
        if not isinstance(command, str):
            raise ValueError(f"command for '{name}' must be a string")
        keybind = data.get("keybind")
        if keybind is not None and not isinstance(keybind, str):
            raise ValueError(f"keybind for '{name}' must be a string")
        # Hand-edited files may carry more than one character
        return cls(name=name, command=command, keybind=keybind[:1] if keybind else None)

    def label(self) -> str:
        """Display line used in the alias list"""
        kb = f" [{self.keybind}]" if self.keybind else ""
        return f"{self.name}{kb} - {self.command}"
