"""Client list screen state.

This module holds what a client list screen needs between user actions: the
last successfully reconciled list, the selected filter and the last error.
Presentation layers (the CLI today, anything else tomorrow) drive it through
`refresh`/`select_mode` and react through `RosterHooks`, which keeps printing
and widgets out of the core.

Rules:
- A successful refresh replaces the list wholesale; a failed one keeps the
  previous list (or the empty one) in place.
- After `close()` no hook fires, even if a response arrives late.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from dataclasses import dataclass
from typing import Callable

from core.domain.errors import ClientDataError
from core.domain.filter_mode import FilterMode
from core.domain.models import ClientProfile
from core.interfaces.client_source import ClientSource
from core.services.client_filter import filter_profiles
from core.services.reconcile import reconcile

logger = logging.getLogger(__name__)


@dataclass
class RosterHooks:
    """Optional callbacks for UI layers."""

    loaded: Callable[[list[ClientProfile]], None] | None = None
    error: Callable[[str], None] | None = None
    view_changed: Callable[[list[ClientProfile]], None] | None = None


class ClientRoster:
    """Cached client list plus the current filter selection."""

    def __init__(
        self,
        source: ClientSource,
        *,
        hooks: RosterHooks | None = None,
        mode: FilterMode = FilterMode.ALL,
    ) -> None:
        self._source = source
        self._hooks = hooks or RosterHooks()
        self._profiles: tuple[ClientProfile, ...] = ()
        self._mode = FilterMode(mode)
        self._last_error: str | None = None
        self._task: asyncio.Task[bool] | None = None
        self._closed = False

    @property
    def profiles(self) -> list[ClientProfile]:
        return list(self._profiles)

    @property
    def mode(self) -> FilterMode:
        return self._mode

    @property
    def last_error(self) -> str | None:
        return self._last_error

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def visible(self) -> list[ClientProfile]:
        return filter_profiles(self._profiles, self._mode)

    async def refresh(self) -> bool:
        """Fetch and reconcile the list. Returns `False` when it failed."""

        if self._closed:
            raise RuntimeError("ClientRoster is closed")

        try:
            body = await self._source.fetch_clients()
            profiles = reconcile(body)
        except ClientDataError as exc:
            if self._closed:
                return False
            self._last_error = str(exc)
            logger.error("Failed to load clients: %s", self._last_error)
            if self._hooks.error:
                self._hooks.error(self._last_error)
            return False

        if self._closed:
            logger.debug("Discarding %d clients received after close", len(profiles))
            return False

        self._profiles = tuple(profiles)
        self._last_error = None
        if self._hooks.loaded:
            self._hooks.loaded(list(self._profiles))
        if self._hooks.view_changed:
            self._hooks.view_changed(self.visible)
        return True

    def start_refresh(self) -> asyncio.Task[bool]:
        """Schedule a refresh on the running loop, reusing one already in flight."""

        if self._closed:
            raise RuntimeError("ClientRoster is closed")
        if self._task is not None and not self._task.done():
            return self._task
        self._task = asyncio.get_running_loop().create_task(self.refresh())
        return self._task

    def select_mode(self, mode: FilterMode) -> list[ClientProfile]:
        self._mode = FilterMode(mode)
        visible = self.visible
        if self._hooks.view_changed and not self._closed:
            self._hooks.view_changed(visible)
        return visible

    def select_index(self, index: int) -> list[ClientProfile]:
        """Dropdown entry point: 0 = All, 1 = Managers, 2 = Non-managers."""

        return self.select_mode(FilterMode.from_index(index))

    def find(self, client_id: int) -> ClientProfile | None:
        for profile in self._profiles:
            if profile.id == client_id:
                return profile
        return None

    async def close(self) -> None:
        """Tear down: abandon any in-flight refresh and silence the hooks."""

        self._closed = True
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
