"""View selector over the cached client list.

The three members follow the order of the list screen dropdown, so the
position reported by a widget maps directly through `FilterMode.from_index`.
"""

from __future__ import annotations

from enum import Enum


class FilterMode(str, Enum):
    """Which subset of the client list is visible."""

    ALL = "all"
    MANAGERS = "managers"
    NON_MANAGERS = "non-managers"

    @classmethod
    def default(cls) -> "FilterMode":
        return cls.ALL

    @classmethod
    def from_index(cls, index: int) -> "FilterMode":
        """Map a dropdown position (0 = All, 1 = Managers, 2 = Non-managers)."""

        members = list(cls)
        if not 0 <= index < len(members):
            raise ValueError(f"Unknown filter index: {index}")
        return members[index]

    def label(self) -> str:
        """Human readable caption for menus and table titles."""

        return {
            FilterMode.ALL: "All",
            FilterMode.MANAGERS: "Managers",
            FilterMode.NON_MANAGERS: "Non-managers",
        }[self]
