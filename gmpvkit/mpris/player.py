"""The org.mpris.MediaPlayer2.Player interface."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from typing import Any
from urllib.parse import quote

from gmpvkit.defs import MPRIS_OBJ_ROOT_PATH, MPRIS_TRACK_ID_PREFIX
from gmpvkit.mpris.module import MessageBus, MprisModule

log = logging.getLogger(__name__)

INTERFACE_NAME = "org.mpris.MediaPlayer2.Player"

# mpv tag name -> (MPRIS tag name, whether the value is sent as a list)
_TAG_MAP = {
    "album": ("xesam:album", False),
    "album_artist": ("xesam:albumArtist", True),
    "artist": ("xesam:artist", True),
    "comment": ("xesam:comment", True),
    "composer": ("xesam:composer", False),
    "genre": ("xesam:genre", True),
    "title": ("xesam:title", False),
}

_KEY_METHODS = {
    "Next": "NEXT",
    "Previous": "PREV",
    "Pause": "PAUSE",
    "PlayPause": "PLAYPAUSE",
    "Stop": "STOP",
    "Play": "PLAY",
}

_URI_SAFE = "/!$&'()*+,;=:@~-._"


def _entry_pair(entry: Any) -> tuple[str, str]:
    if isinstance(entry, tuple):
        key, value = entry
        return key, value
    return entry.key, entry.value


def _filename_to_uri(path: str) -> str | None:
    if not os.path.isabs(path):
        return None
    return "file://" + quote(path, safe=_URI_SAFE)


def _strtoll(text: str) -> int:
    """Parse a leading integer the way strtoll with base 0 does; 0 if none."""
    s = text.lstrip()
    sign = 1
    if s[:1] in ("+", "-"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    if s[:2].lower() == "0x" and len(s) > 2 and s[2] in "0123456789abcdefABCDEF":
        base, s, digits = 16, s[2:], "0123456789abcdef"
    elif s.startswith("0"):
        base, digits = 8, "01234567"
    else:
        base, digits = 10, "0123456789"
    end = 0
    while end < len(s) and s[end].lower() in digits:
        end += 1
    return sign * int(s[:end], base) if end else 0


def build_metadata_tags(entries: Iterable[Any] | None) -> dict[str, Any]:
    """Translate mpv metadata entries to MPRIS tags.

    Entries are ``(key, value)`` pairs or objects with ``key`` and ``value``.
    Known tags get their MPRIS names, some of them as one-element lists;
    other keys pass through unchanged.
    """
    tags: dict[str, Any] = {}
    for entry in entries or ():
        key, value = _entry_pair(entry)
        tag_name, is_array = _TAG_MAP.get(key.lower(), (key, False))
        log.debug('Adding metadata tag "%s"', tag_name)
        tags[tag_name] = [value] if is_array else value
    return tags


def playback_status(idle_active: bool, core_idle: bool) -> tuple[str, bool]:
    """Return the MPRIS playback status and whether seeking is possible."""
    if not core_idle and not idle_active:
        return "Playing", True
    if core_idle and idle_active:
        return "Stopped", False
    return "Paused", True


def loop_status(loop_file: str | None, loop_playlist: str | None) -> str:
    """Return the MPRIS loop status for mpv's loop-file and loop-playlist."""
    if loop_file == "inf":
        return "Track"
    if loop_playlist == "inf":
        return "Playlist"
    return "None"


class MprisPlayer(MprisModule):
    """Playback control and state of the player.

    The controller provides ``model``: an observable with attributes
    ``idle_active``, ``core_idle``, ``playlist_count``, ``playlist_pos``,
    ``speed``, ``loop_file``, ``loop_playlist``, ``metadata``, ``volume`` and
    ``duration``, and methods ``key_press``, ``seek``, ``seek_offset``,
    ``set_playlist_position``, ``load_file``, ``get_time_position`` and
    ``get_current_path``.
    """

    def __init__(self, controller: Any, conn: MessageBus) -> None:
        super().__init__(conn, INTERFACE_NAME)
        self.controller = controller
        self.reg_id = 0

    @property
    def _model(self) -> Any:
        return self.controller.model

    def register_interface(self) -> None:
        model = self._model
        notify = {
            "core-idle": self.update_playback_status,
            "idle-active": self.update_playback_status,
            "playlist-pos": self.update_playlist_state,
            "playlist-count": self.update_playlist_state,
            "speed": self.update_speed,
            "loop-file": self.update_loop,
            "loop-playlist": self.update_loop,
            "metadata": self.update_metadata,
            "volume": self.update_volume,
        }
        for prop, update in notify.items():
            self.connect_signal(model, f"notify::{prop}", lambda *_, f=update: f())
        self.connect_signal(model, "playback-restart", self._playback_restart)

        self.set_properties(
            {
                "PlaybackStatus": "Stopped",
                "LoopStatus": "None",
                "Rate": 1.0,
                "Metadata": {},
                "Volume": 1.0,
                "MinimumRate": 0.01,
                "MaximumRate": 100.0,
                "CanGoNext": False,
                "CanGoPrevious": False,
                "CanPlay": True,
                "CanPause": True,
                "CanSeek": False,
                "CanControl": True,
            }
        )
        self.reg_id = self.conn.register_object(
            MPRIS_OBJ_ROOT_PATH, self.interface_name, self
        )

        self.update_playback_status()
        self.update_playlist_state()
        self.update_speed()
        self.update_metadata()
        self.update_volume()

    def unregister_interface(self) -> None:
        self.conn.unregister_object(self.reg_id)
        self.reg_id = 0

    def handle_method(self, method_name: str, parameters: tuple[Any, ...] = ()) -> tuple:
        """Run a method call; unknown methods do nothing. Returns the empty reply."""
        model = self._model
        if method_name in _KEY_METHODS:
            model.key_press(_KEY_METHODS[method_name])
        elif method_name == "Seek":
            (offset_us,) = parameters
            model.seek_offset(offset_us / 1.0e6)
        elif method_name == "SetPosition":
            track, time_us = parameters
            if track.startswith(MPRIS_TRACK_ID_PREFIX):
                index = _strtoll(track[len(MPRIS_TRACK_ID_PREFIX):])
                model.set_playlist_position(index)
                model.seek(time_us / 1.0e6)
        elif method_name == "OpenUri":
            (uri,) = parameters
            model.load_file(uri, False)
        return ()

    def get_property_value(self, name: str) -> Any:
        """Return a property; Position is read live from the model in microseconds."""
        if name == "Position":
            return int(self._model.get_time_position() * 1e6)
        return self.get_property(name)

    def set_property_value(self, name: str, value: Any) -> bool:
        """Set a property from the bus and apply it to the model; always succeeds."""
        model = self._model
        if name == "LoopStatus":
            model.loop_file = "inf" if value == "Track" else "no"
            model.loop_playlist = "inf" if value == "Playlist" else "no"
        elif name == "Rate":
            model.speed = float(value)
        elif name == "Volume":
            model.volume = 100 * float(value)
        self.set_properties({name: value})
        return True

    def update_playback_status(self) -> None:
        """Publish PlaybackStatus and CanSeek from the model's idle state."""
        state, can_seek = playback_status(
            bool(self._model.idle_active), bool(self._model.core_idle)
        )
        self.set_properties({"PlaybackStatus": state, "CanSeek": can_seek})

    def update_playlist_state(self) -> None:
        """Publish whether there are previous and next playlist items."""
        count = self._model.playlist_count
        pos = self._model.playlist_pos
        self.set_properties(
            {"CanGoPrevious": pos > 0, "CanGoNext": pos < count - 1}
        )

    def update_speed(self) -> None:
        """Publish the playback rate."""
        self.set_properties({"Rate": float(self._model.speed)})

    def update_loop(self) -> None:
        """Publish the loop status."""
        status = loop_status(self._model.loop_file, self._model.loop_playlist)
        self.set_properties({"LoopStatus": status})

    def update_metadata(self) -> None:
        """Publish the metadata of the current track."""
        model = self._model
        path = model.get_current_path() or ""
        uri = _filename_to_uri(path) or path

        metadata: dict[str, Any] = {"xesam:url": uri}
        metadata["mpris:length"] = int(model.duration * 1e6)
        metadata["mpris:trackid"] = f"{MPRIS_TRACK_ID_PREFIX}{model.playlist_pos}"
        metadata.update(build_metadata_tags(model.metadata))

        self.set_properties({"Metadata": metadata})

    def update_volume(self) -> None:
        """Publish the volume on the 0..1 scale."""
        self.set_properties({"Volume": self._model.volume / 100.0})

    def _playback_restart(self, model: Any, *_: Any) -> None:
        position = model.get_time_position()
        self.conn.emit_signal(
            MPRIS_OBJ_ROOT_PATH,
            self.interface_name,
            "Seeked",
            (int(position * 1e6),),
        )