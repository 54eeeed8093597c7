"""Forwarding of desktop media keys to the player."""

from __future__ import annotations

from typing import Any

from gmpvkit.defs import APP_ID

MEDIA_KEYS_BUS_NAME = "org.gnome.SettingsDaemon.MediaKeys"
MEDIA_KEYS_OBJECT_PATH = "/org/gnome/SettingsDaemon/MediaKeys"
MEDIA_KEYS_INTERFACE = "org.gnome.SettingsDaemon.MediaKeys"

_KEY_MAP = {
    "Next": "NEXT",
    "Previous": "PREV",
    "Pause": "PAUSE",
    "Stop": "STOP",
    "Play": "PLAY",
    "FastForward": "FORWARD",
    "Rewind": "REWIND",
}


def translate_key(gsd_key: str | None) -> str | None:
    """Return the mpv key name for a settings-daemon media key, or None."""
    if gsd_key is None:
        return None
    return _KEY_MAP.get(gsd_key)


class MediaKeys:
    """Grabs the media keys while the window is focused and presses them in mpv.

    The controller provides ``view``, an observable that emits
    ``window-state-event`` with ``(focus_changed, focused)``, and ``model``
    with ``key_press(key)``. The settings-daemon proxy is handed over with
    ``proxy_ready``; it is an observable emitting ``g-signal`` with
    ``(sender, signal_name, parameters)`` and has ``call(method, args)``.
    """

    def __init__(self, controller: Any) -> None:
        self.controller = controller
        self.proxy: Any = None
        self._proxy_sig_id = 0
        self.focus_sig_id = controller.view.connect(
            "window-state-event", self.window_state_changed
        )

    def _grab(self) -> None:
        self.proxy.call("GrabMediaPlayerKeys", (APP_ID, 0))

    def proxy_ready(self, proxy: Any) -> None:
        """Take the settings-daemon proxy, listen to it and grab the keys."""
        if proxy is None:
            raise RuntimeError("Failed to create GDBus proxy for media keys")
        self.proxy = proxy
        self._proxy_sig_id = proxy.connect("g-signal", self.handle_signal)
        self._grab()

    def handle_signal(
        self, sender: str | None, signal_name: str, parameters: tuple[Any, ...]
    ) -> str | None:
        """Press the mpv key for a media key meant for us; return the key pressed."""
        if signal_name != "MediaPlayerKeyPressed":
            return None
        application, key = parameters
        if application != APP_ID:
            return None
        mpv_key = translate_key(key)
        if mpv_key is not None:
            self.controller.model.key_press(mpv_key)
        return mpv_key

    def window_state_changed(self, focus_changed: bool, focused: bool) -> bool:
        """Grab the keys again when the window gains focus; never stops the event."""
        if focus_changed and focused and self.proxy is not None:
            self._grab()
        return False

    def dispose(self) -> None:
        """Stop listening to the window and drop the proxy."""
        if self.focus_sig_id > 0:
            self.controller.view.disconnect(self.focus_sig_id)
            self.focus_sig_id = 0
        if self.proxy is not None and self._proxy_sig_id > 0:
            self.proxy.disconnect(self._proxy_sig_id)
        self._proxy_sig_id = 0
        self.proxy = None