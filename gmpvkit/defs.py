"""Application identifiers, limits and lookup tables shared across the player."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntFlag

APP_ID = "io.github.Celluloid"
ICON_NAME = APP_ID
BIN_NAME = "celluloid"
CONFIG_DIR = BIN_NAME
CONFIG_ROOT = APP_ID
CONFIG_WIN_STATE = f"{APP_ID}.window-state"
ACTION_PREFIX = "gmpv-action"
DEFAULT_LOG_LEVEL = "error"

MPRIS_TRACK_LIST_BEFORE = 10
MPRIS_TRACK_LIST_AFTER = 10
MPRIS_OBJ_ROOT_PATH = "/org/mpris/MediaPlayer2"
MPRIS_TRACK_ID_NO_TRACK = f"{MPRIS_OBJ_ROOT_PATH}/TrackList/NoTrack"
MPRIS_TRACK_ID_PREFIX = "/" + APP_ID.replace(".", "/") + "/Track/"
MPRIS_BUS_NAME = f"org.mpris.MediaPlayer2.{APP_ID}"

PLAYLIST_DEFAULT_WIDTH = 200
PLAYLIST_MIN_WIDTH = 20
CSD_WIDTH_OFFSET = 52
CSD_HEIGHT_OFFSET = 99
WAYLAND_NOCSD_HEIGHT_OFFSET = 60
MAIN_WINDOW_DEFAULT_WIDTH = 625
MAIN_WINDOW_DEFAULT_HEIGHT = 400
SEEK_BAR_UPDATE_INTERVAL = 250
FS_CONTROL_HIDE_DELAY = 1
KEYSTRING_MAX_LEN = 16
MIN_MPV_VERSION = (0, 29, 0)

SUBTITLE_EXTS = tuple(
    "utf utf8 utf-8 idx sub srt smi rt txt ssa aqt jss js ass mks vtt sup".split()
)

PLAYLIST_EXTS = tuple("m3u m3u8 ini pls txt".split())


class TargetFlags(IntFlag):
    """Restrictions on where a drag-and-drop target may come from."""

    NONE = 0
    SAME_APP = 1


@dataclass(frozen=True)
class DndTarget:
    """A drag-and-drop target accepted by the video area and playlist."""

    target: str
    flags: TargetFlags = TargetFlags.NONE
    info: int = 0


DND_TARGETS = (
    DndTarget("PLAYLIST_PATH", TargetFlags.SAME_APP),
    *(DndTarget(name) for name in ("text/uri-list", "text/plain", "STRING")),
)


def _action_bind(key: str, action: str) -> str:
    return f"{key} script-message {ACTION_PREFIX} win.{action}"


DEFAULT_KEYBINDS = (
    _action_bind("Ctrl+o", "show-open-dialog(false)"),
    _action_bind("Ctrl+l", "show-open-location-dialog(false)"),
    _action_bind("Ctrl+Shift+o", "show-open-dialog(true)"),
    _action_bind("Ctrl+Shift+l", "show-open-location-dialog(true)"),
    _action_bind("Ctrl+Shift+s", "save-playlist"),
    _action_bind("Ctrl+q", "quit"),
    _action_bind("Ctrl+?", "show-shortcuts-dialog"),
    _action_bind("Ctrl+p", "show-preferences-dialog"),
    _action_bind("Ctrl+h", "toggle-controls"),
    _action_bind("F9", "toggle-playlist"),
    _action_bind("DEL", "remove-selected-playlist-item"),
    *(f"{key} stop" for key in ("U", "STOP")),
    "F11 cycle fullscreen",
    *(f"WHEEL_{d} add volume {n}" for d, n in (("UP", 2), ("DOWN", -2))),
    *(f"WHEEL_{d} no-osd seek {n}" for d, n in (("LEFT", -10), ("RIGHT", 10))),
)


def _pairs(text: str) -> tuple[tuple[str, str], ...]:
    words = text.split()
    return tuple(zip(words[::2], words[1::2], strict=True))


_PUNCTUATION = tuple(
    zip(
        "<>.,`~!@$%^&*-_=+;:'\"/\\()[]{}?",
        (
            "less greater period comma grave asciitilde exclam at dollar "
            "percent caret ampersand asterisk minus underscore equal plus "
            "semicolon colon apostrophe quotedbl slash backslash parenleft "
            "parenright bracketleft bracketright braceleft braceright question"
        ).split(),
        strict=True,
    )
)

_KEYPAD = (("*", "KP_Multiply"), ("-", "KP_Subtract"), ("+", "KP_Add"), ("/", "KP_Divide"))

_NAMED_KEYS = _pairs(
    """
    PGUP Page_Up  PGDWN Page_Down  BS BackSpace  SHARP numbersign
    RIGHT Right  LEFT Left  UP Up  DOWN Down  ESC Escape  DEL Delete
    ENTER Return  INS Insert  VOLUME_LOWER AudioLowerVolume  MUTE AudioMute
    VOLUME_UP AudioRaiseVolume  PLAY AudioPlay  STOP AudioStop
    PREV AudioPrev  NEXT AudioNext  FORWARD AudioForward  REWIND AudioRewind
    MENU Menu  HOMEPAGE HomePage  MAIL Mail  FAVORITES Favorites
    SEARCH Search  SLEEP Sleep  CANCEL Cancel  RECORD AudioRecord
    """
)

_MODIFIERS = tuple(
    ("", f"{modifier}_{side}")
    for modifier in ("Control", "Alt", "Meta", "Shift")
    for side in ("L", "R")
)

# Pairs of (mpv key name, keysym name). An empty mpv name marks a bare modifier.
KEYSTRING_MAP = _NAMED_KEYS + _PUNCTUATION + _KEYPAD + _MODIFIERS

SUPPORTED_PROTOCOLS = tuple(
    """
    cdda rtmp rtsp http https mms mmst mmsh mmshttp rtp httpproxy hls
    rtmpe rtmps rtmpt rtmpte rtmpts srtp lavf ffmpeg udp ftp tcp tls unix
    sftp md5 concat avdevice av dvb tv pvr smb file dvdread dvd dvdnav bd br
    bluray bdnav brnav bluraynav memory null mf edl rar
    """.split()
)


def _mime_group(kind: str, subtypes: str) -> tuple[str, ...]:
    return tuple(f"{kind}/{subtype}" for subtype in subtypes.split())


SUPPORTED_MIME_TYPES = (
    _mime_group(
        "application",
        "ogg x-ogg sdp smil x-smil streamingmedia x-streamingmedia "
        "vnd.rn-realmedia vnd.rn-realmedia-vbr",
    )
    + _mime_group(
        "audio",
        "aac x-aac m4a x-m4a mp1 x-mp1 mp2 x-mp2 mp3 x-mp3 mpeg x-mpeg "
        "mpegurl x-mpegurl mpg x-mpg rn-mpeg ogg scpls x-scpls "
        "vnd.rn-realaudio wav x-pn-windows-pcm x-realaudio x-pn-realaudio "
        "x-ms-wma x-pls x-wav",
    )
    + _mime_group(
        "video",
        "mpeg x-mpeg x-mpeg2 mp4 msvideo x-msvideo ogg quicktime "
        "vnd.rn-realvideo x-ms-afs x-ms-asf x-ms-wmv x-ms-wmx x-ms-wvxvideo "
        "x-avi x-fli x-flv x-theora x-matroska webm",
    )
    + _mime_group("audio", "x-flac x-vorbis+ogg")
    + _mime_group("video", "x-ogm+ogg")
    + _mime_group("audio", "x-shorten x-ape x-wavpack x-tta AMR ac3")
    + _mime_group("video", "mp2t")
    + _mime_group("audio", "flac")
)

_MPV_BY_KEYSYM = {keysym: mpv for mpv, keysym in KEYSTRING_MAP}


def keysyms_for(mpv_key: str) -> tuple[str, ...]:
    """Return every keysym that maps to the given mpv key name, in table order."""
    return tuple(keysym for mpv, keysym in KEYSTRING_MAP if mpv == mpv_key)


def mpv_key_for(keysym: str) -> str | None:
    """Return the mpv key name for a keysym, or None if the keysym is not mapped.

    Bare modifier keysyms map to the empty string.
    """
    return _MPV_BY_KEYSYM.get(keysym)


def has_extension(path: str, extensions: Iterable[str]) -> bool:
    """Tell whether the path's extension is one of the given ones, ignoring case."""
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in name:
        return False
    ext = name.rsplit(".", 1)[1].lower()
    return ext in {e.lower() for e in extensions}