"""The org.mpris.MediaPlayer2 root interface."""

from __future__ import annotations

from typing import Any

from gmpvkit.defs import (
    APP_ID,
    MPRIS_OBJ_ROOT_PATH,
    SUPPORTED_MIME_TYPES,
    SUPPORTED_PROTOCOLS,
)
from gmpvkit.mpris.module import MessageBus, MprisModule

INTERFACE_NAME = "org.mpris.MediaPlayer2"
IDENTITY = "Celluloid"


def supported_uri_schemes() -> list[str]:
    """Return the URI schemes the player can open."""
    return list(SUPPORTED_PROTOCOLS)


def supported_mime_types() -> list[str]:
    """Return the MIME types the player can open."""
    return list(SUPPORTED_MIME_TYPES)


class MprisBase(MprisModule):
    """Raise, Quit and fullscreen control of the player window.

    The controller provides ``view`` (with ``present()``, ``set_fullscreen()``
    and signals), ``model`` (with a ``fullscreen`` attribute) and ``quit()``.
    """

    def __init__(self, controller: Any, conn: MessageBus) -> None:
        super().__init__(conn, INTERFACE_NAME)
        self.controller = controller
        self.reg_id = 0

    def register_interface(self) -> None:
        view = self.controller.view
        self.connect_signal(
            view, "notify::fullscreen", lambda *_: self.update_fullscreen()
        )
        self.set_properties(
            {
                "CanQuit": True,
                "CanSetFullscreen": True,
                "CanRaise": True,
                "Fullscreen": False,
                "HasTrackList": True,
                "Identity": IDENTITY,
                "DesktopEntry": APP_ID,
                "SupportedUriSchemes": supported_uri_schemes(),
                "SupportedMimeTypes": supported_mime_types(),
            }
        )
        self.reg_id = self.conn.register_object(
            MPRIS_OBJ_ROOT_PATH, self.interface_name, self
        )
        self.update_fullscreen()

    def unregister_interface(self) -> None:
        self.conn.unregister_object(self.reg_id)
        self.reg_id = 0

    def handle_method(self, method_name: str, parameters: tuple[Any, ...] = ()) -> tuple:
        """Run a method call; unknown methods do nothing. Returns the empty reply."""
        if method_name == "Raise":
            self.controller.view.present()
        elif method_name == "Quit":
            self.controller.quit()
        return ()

    def get_property_value(self, name: str) -> Any:
        """Return the value of a property, or None if it is unknown."""
        return self.get_property(name)

    def set_property_value(self, name: str, value: Any) -> bool:
        """Set a property from the bus; always succeeds."""
        if name == "Fullscreen":
            self.controller.view.set_fullscreen(bool(value))
        else:
            self.set_properties({name: value})
        return True

    def update_fullscreen(self) -> None:
        """Publish the model's fullscreen state if it differs from the stored one."""
        fullscreen = bool(self.controller.model.fullscreen)
        if bool(self.get_property("Fullscreen")) != fullscreen:
            self.set_properties({"Fullscreen": fullscreen})