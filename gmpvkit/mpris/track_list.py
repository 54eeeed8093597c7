"""The org.mpris.MediaPlayer2.TrackList interface."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from typing import Any
from urllib.parse import quote

from gmpvkit.defs import (
    MPRIS_OBJ_ROOT_PATH,
    MPRIS_TRACK_ID_NO_TRACK,
    MPRIS_TRACK_ID_PREFIX,
    MPRIS_TRACK_LIST_AFTER,
    MPRIS_TRACK_LIST_BEFORE,
)
from gmpvkit.mpris.module import MessageBus, MprisModule

log = logging.getLogger(__name__)

INTERFACE_NAME = "org.mpris.MediaPlayer2.TrackList"

_URI_SAFE = "/!$&'()*+,;=:@~-._"


def _filename_to_uri(path: str) -> str | None:
    if not os.path.isabs(path):
        return None
    return "file://" + quote(path, safe=_URI_SAFE)


def _name_from_path(path: str) -> str:
    name = path.rstrip("/").rsplit("/", 1)[-1]
    return name or path


def _parse_decimal(text: str) -> tuple[int, str]:
    """Parse a leading base-10 integer; return it and the unparsed rest."""
    s = text.lstrip()
    sign = 1
    body = s
    if body[:1] in ("+", "-"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    end = 0
    while end < len(body) and body[end] in "0123456789":
        end += 1
    if end == 0:
        return 0, text
    return sign * int(body[:end]), body[end:]


def track_id(index: int) -> str:
    """Return the MPRIS track object path of a playlist index."""
    return f"{MPRIS_TRACK_ID_PREFIX}{index}"


def track_id_to_index(track_id: str) -> int:
    """Return the playlist index of a track id, or -1 if it is not one of ours.

    Trailing characters after the number are reported as a warning.
    """
    if not track_id.startswith(MPRIS_TRACK_ID_PREFIX):
        return -1
    index, rest = _parse_decimal(track_id[len(MPRIS_TRACK_ID_PREFIX):])
    if rest:
        log.warning("Failed to parse track ID: %s", track_id)
    return index


def playlist_entry_metadata(entry: Any, index: int) -> dict[str, str]:
    """Return the MPRIS metadata of a playlist entry at the given index.

    The entry has ``filename`` and an optional ``title``.
    """
    filename = entry.filename
    title = getattr(entry, "title", None) or _name_from_path(filename)
    uri = _filename_to_uri(filename) or filename
    return {
        "mpris:trackid": track_id(index),
        "xesam:title": title,
        "xesam:uri": uri,
    }


def tracks_window(playlist_count: int, playlist_pos: int) -> tuple[list[str], str]:
    """Return the track ids around the current position and the current track id.

    The current track id is the no-track path when the position is outside
    the playlist.
    """
    current = MPRIS_TRACK_ID_NO_TRACK
    tracks: list[str] = []
    start = max(0, playlist_pos - MPRIS_TRACK_LIST_BEFORE)
    stop = min(playlist_count, playlist_pos + MPRIS_TRACK_LIST_AFTER)
    for index in range(start, stop):
        path = track_id(index)
        if index == playlist_pos:
            current = path
        tracks.append(path)
    if playlist_count <= 0 or not 0 <= playlist_pos < playlist_count:
        current = MPRIS_TRACK_ID_NO_TRACK
    return (tracks if playlist_count > 0 else []), current


def get_tracks_metadata(
    playlist: Sequence[Any], track_ids: Iterable[str]
) -> list[dict[str, str]]:
    """Return the metadata of every known track id, skipping unknown ones."""
    if playlist is None:
        raise ValueError("playlist is required")
    if track_ids is None:
        raise ValueError("track_ids is required")
    result = []
    for tid in track_ids:
        index = track_id_to_index(tid)
        if 0 <= index < len(playlist):
            result.append(playlist_entry_metadata(playlist[index], index))
        else:
            log.warning(
                "Attempted to retrieve metadata of non-existent track ID: %s", tid
            )
    return result


class MprisTrackList(MprisModule):
    """A read-only view of the playlist around the current track.

    The controller provides ``model``: an observable with attributes
    ``playlist`` (a sequence of entries with ``filename`` and ``title``) and
    ``playlist_pos``, which emits ``notify::playlist`` and
    ``metadata-update`` (with the model and the index).
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
        self.connect_signal(model, "notify::playlist", lambda *_: self.update_playlist())
        self.connect_signal(model, "metadata-update", self._metadata_update)
        self.set_properties({"Tracks": [], "CanEditTracks": False})
        self.reg_id = self.conn.register_object(
            MPRIS_OBJ_ROOT_PATH, self.interface_name, self
        )
        self.update_playlist()

    def unregister_interface(self) -> None:
        self.conn.unregister_object(self.reg_id)
        self.reg_id = 0

    def handle_method(self, method_name: str, parameters: tuple[Any, ...] = ()) -> tuple:
        """Run a method call and return its reply."""
        model = self._model
        if method_name == "GetTracksMetadata":
            (track_ids,) = parameters
            return (get_tracks_metadata(model.playlist, track_ids),)
        if method_name == "GoTo":
            tid = parameters[0]
            if tid.startswith(MPRIS_TRACK_ID_PREFIX):
                index, _ = _parse_decimal(tid[len(MPRIS_TRACK_ID_PREFIX):])
                model.playlist_pos = index
            else:
                log.warning(
                    "The GoTo MPRIS method was called with invalid track ID: %s", tid
                )
        elif method_name in ("AddTrack", "RemoveTrack"):
            log.warning(
                "The %s MPRIS method was called even though "
                "CanEditTracks property is FALSE",
                method_name,
            )
        else:
            log.critical("Attempted to call unknown method: %s", method_name)
        return ()

    def get_property_value(self, name: str) -> Any:
        """Return the value of a property, or None if it is unknown."""
        return self.get_property(name)

    def set_property_value(self, name: str, value: Any) -> bool:
        """Refuse to set a property: the interface is read-only."""
        log.warning(
            "Attempted to set property %s in %s, but the interface "
            "only has read-only properties.",
            name,
            INTERFACE_NAME,
        )
        return False

    def update_playlist(self) -> None:
        """Invalidate Tracks and announce the replaced track list."""
        model = self._model
        playlist = model.playlist
        count = len(playlist) if playlist else 0
        tracks, current = tracks_window(count, model.playlist_pos)
        self.set_properties({"Tracks": tracks}, send_new_value=False)
        self.conn.emit_signal(
            MPRIS_OBJ_ROOT_PATH,
            self.interface_name,
            "TrackListReplaced",
            (tracks, current),
        )

    def _metadata_update(self, model: Any, pos: int, *_: Any) -> None:
        metadata = playlist_entry_metadata(model.playlist[pos], pos)
        self.conn.emit_signal(
            MPRIS_OBJ_ROOT_PATH,
            self.interface_name,
            "TrackMetadataChanged",
            (track_id(pos), metadata),
        )