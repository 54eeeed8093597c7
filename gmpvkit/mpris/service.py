"""The MPRIS service: owns the bus name and exports the three interfaces."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from gmpvkit.defs import MPRIS_BUS_NAME
from gmpvkit.mpris.base import MprisBase
from gmpvkit.mpris.module import MessageBus, MprisModule
from gmpvkit.mpris.player import MprisPlayer
from gmpvkit.mpris.track_list import MprisTrackList

log = logging.getLogger(__name__)


def build_string_array(items: Iterable[str | None]) -> list[str]:
    """Collect strings into a list, stopping at the first None."""
    result: list[str] = []
    for item in items:
        if item is None:
            break
        result.append(item)
    return result


class Mpris:
    """Publishes the player on the session bus under a per-window name.

    ``bus`` is the session bus connection, or None when none could be made;
    the service is then unavailable. Once the bus reports the name as
    acquired, ``name_acquired`` exports the root, Player and TrackList
    interfaces; ``name_lost`` withdraws them.
    """

    def __init__(self, controller: Any, bus: MessageBus | None, window_id: int) -> None:
        self.controller = controller
        self.bus = bus
        self.conn: MessageBus | None = None
        self.base: MprisModule | None = None
        self.player: MprisModule | None = None
        self.track_list: MprisModule | None = None
        self.bus_name: str | None = None
        self.owns_name = False

        if bus is not None:
            self.bus_name = f"{MPRIS_BUS_NAME}.instance-{window_id}"
            self.owns_name = True
        else:
            log.warning("Failed to create DBus connection; MPRIS will be unavailable")

    @property
    def modules(self) -> tuple[MprisModule, ...]:
        """The exported interface modules that exist."""
        return tuple(
            m for m in (self.base, self.player, self.track_list) if m is not None
        )

    def name_acquired(self, conn: MessageBus, name: str) -> None:
        """Create and export the interfaces on the connection that got the name."""
        self.conn = conn
        self.base = MprisBase(self.controller, conn)
        self.player = MprisPlayer(self.controller, conn)
        self.track_list = MprisTrackList(self.controller, conn)

        for module in self.modules:
            module.register()

    def name_lost(self, conn: MessageBus | None, name: str) -> None:
        """Withdraw the exported interfaces."""
        self._unregister()

    def _unregister(self) -> None:
        for module in self.modules:
            module.unregister()

    def dispose(self) -> None:
        """Withdraw and drop the interfaces and release the bus name."""
        self._unregister()
        for module in self.modules:
            module.dispose()
        self.base = None
        self.player = None
        self.track_list = None
        self.owns_name = False