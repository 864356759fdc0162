"""Ordered list editing for profile list fields.

All operations mutate the given list in place. Out-of-range indices are a
programming error and raise IndexError.
"""

from __future__ import annotations


def add_item(items: list[str], value: str) -> bool:
    """Append ``value`` trimmed; blank input is a no-op.

    Returns:
        bool: True if an item was appended
    """
    value = value.strip()
    if not value:
        return False
    items.append(value)
    return True


def remove_item(items: list[str], index: int) -> str:
    """Delete and return the item at ``index``."""
    _check_index(items, index)
    return items.pop(index)


def reorder_item(items: list[str], from_index: int, to_index: int) -> None:
    """Move the item at ``from_index`` so it ends up at ``to_index``."""
    _check_index(items, from_index)
    _check_index(items, to_index)
    if from_index == to_index:
        return
    item = items.pop(from_index)
    items.insert(to_index, item)


def _check_index(items: list[str], index: int) -> None:
    if not 0 <= index < len(items):
        raise IndexError(f"index {index} out of range for list of length {len(items)}")
