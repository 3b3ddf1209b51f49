"""Filtering of the cached client list."""

from __future__ import annotations

from typing import Sequence

from core.domain.filter_mode import FilterMode
from core.domain.models import ClientProfile


def filter_profiles(profiles: Sequence[ClientProfile], mode: FilterMode) -> list[ClientProfile]:
    """Return the profiles visible under `mode`, preserving their order.

    Always returns a new list; the input sequence is never modified.
    """

    mode = FilterMode(mode)
    if mode is FilterMode.ALL:
        return list(profiles)
    if mode is FilterMode.MANAGERS:
        return [profile for profile in profiles if profile.is_manager]
    return [profile for profile in profiles if not profile.is_manager]
