"""Cursor arithmetic over a list whose length changes underneath it.

Every function takes the list length and the current cursor and returns the
new cursor. The result is always None for an empty list and a valid index
otherwise.
"""

from typing import Optional


def is_valid(length: int, current: Optional[int]) -> bool:
    if length == 0:
        return current is None
    return current is not None and 0 <= current < length


def ensure(length: int, current: Optional[int]) -> Optional[int]:
    """Select the first item if nothing valid is selected"""
    if length == 0:
        return None
    if current is None or not 0 <= current < length:
        return 0
    return current


def move_up(length: int, current: Optional[int]) -> Optional[int]:
    if length == 0:
        return None
    i = ensure(length, current)
    return length - 1 if i == 0 else i - 1


def move_down(length: int, current: Optional[int]) -> Optional[int]:
    if length == 0:
        return None
    i = ensure(length, current)
    return (i + 1) % length


def after_remove(length_after: int, was_index: Optional[int] = None) -> Optional[int]:
    """Cursor after deleting the selected item: back to the top"""
    return 0 if length_after > 0 else None


def after_insert(length_after: int) -> Optional[int]:
    """Cursor after appending: the new tail item"""
    return length_after - 1 if length_after > 0 else None
