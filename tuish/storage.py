from typing import Dict, Iterator, List, Optional

from tuish.models import Alias


class IndexOutOfRange(IndexError):
    """Raised when an alias index does not point into the store"""


class AliasStore:
    """Ordered in-memory collection of aliases.

    Insertion order is display order. Persistence is handled by the caller,
    which saves after every successful mutation.
    """

    def __init__(self, aliases: Optional[List[Alias]] = None):
        self.aliases: List[Alias] = list(aliases or [])

    @classmethod
    def from_mapping(cls, mapping: Dict[str, Alias]) -> "AliasStore":
        """Build a store from a name -> Alias mapping, keeping its order"""
        return cls(list(mapping.values()))

    def to_mapping(self) -> Dict[str, Alias]:
        """Project the store back onto a name -> Alias mapping"""
        return {alias.name: alias for alias in self.aliases}

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.aliases):
            raise IndexOutOfRange(
                f"alias index {index} out of range for {len(self.aliases)} aliases"
            )

    def add(self, name: str, command: str, keybind: Optional[str] = None) -> Alias:
        """Append a new alias. Duplicate names and keybinds are accepted."""
        alias = Alias(name=name, command=command, keybind=keybind)
        self.aliases.append(alias)
        return alias

    def update_command(self, index: int, command: str) -> Alias:
        """Replace the command of the alias at index, keeping name and keybind"""
        self._check_index(index)
        alias = self.aliases[index]
        alias.command = command
        return alias

    def remove(self, index: int) -> Alias:
        """Remove and return the alias at index"""
        self._check_index(index)
        return self.aliases.pop(index)

    def get(self, index: int) -> Alias:
        """Get an alias by position"""
        self._check_index(index)
        return self.aliases[index]

    def get_by_name(self, name: str) -> Optional[Alias]:
        """Get the first alias with the given name"""
        for alias in self.aliases:
            if alias.name == name:
                return alias
        return None

    def find_by_keybind(self, char: str) -> Optional[Alias]:
        """Return the first alias bound to char, in display order"""
        for alias in self.aliases:
            if alias.keybind == char:
                return alias
        return None

    def list_all(self) -> List[Alias]:
        """Get all aliases as a list"""
        return list(self.aliases)

    def __len__(self) -> int:
        return len(self.aliases)

    def __iter__(self) -> Iterator[Alias]:
        return iter(self.aliases)
