"""The keyboard shortcut reference, grouped by topic."""

from __future__ import annotations

from dataclasses import dataclass
from gettext import gettext as _


@dataclass(frozen=True)
class ShortcutEntry:
    """One or more space-separated accelerators and what they do."""

    accel: str
    title: str

    @property
    def accelerators(self) -> tuple[str, ...]:
        return tuple(self.accel.split())


@dataclass(frozen=True)
class ShortcutGroup:
    """A titled group of shortcut entries."""

    title: str
    entries: tuple[ShortcutEntry, ...]


def _entries(*pairs: tuple[str, str]) -> tuple[ShortcutEntry, ...]:
    return tuple(ShortcutEntry(accel, title) for accel, title in pairs)


def shortcut_groups() -> tuple[ShortcutGroup, ...]:
    """Return the shortcut groups in display order, with translated titles."""
    general = _entries(
        ("<Ctrl>o", _("Open file")),
        ("<Ctrl>l", _("Open location")),
        ("<Ctrl><Shift>o", _("Add file to playlist")),
        ("<Ctrl><Shift>l", _("Add location to playlist")),
        ("<Ctrl>p", _("Show preferences dialog")),
        ("<Ctrl>h", _("Toggle controls")),
        ("F9", _("Toggle playlist")),
        ("F11 f", _("Toggle fullscreen mode")),
        ("Escape", _("Leave fullscreen mode")),
        ("<Shift>o", _("Toggle OSD states between normal and playback time/duration")),
        ("<Shift>i", _("Show filename on the OSD")),
        ("o <Shift>p", _("Show progress, elapsed time, and duration on the OSD")),
    )
    seeking = _entries(
        ("leftarrow rightarrow", _("Seek backward/forward 5 seconds")),
        ("<Shift>leftarrow <Shift>rightarrow", _("Exact seek backward/forward 1 second")),
        ("downarrow uparrow", _("Seek backward/forward 1 minute")),
        ("<Shift>downarrow <Shift>uparrow", _("Exact seek backward/forward 5 seconds")),
        ("<Ctrl>leftarrow <Ctrl>rightarrow", _("Seek to previous/next subtitle")),
        ("comma period", _("Step backward/forward a single frame")),
        ("Page_Up Page_Down", _("Seek to the beginning of the previous/next chapter")),
    )
    playback = _entries(
        ("bracketleft bracketright", _("Decrease/increase playback speed by 10%")),
        ("braceleft braceright", _("Halve/double current playback speed")),
        ("BackSpace", _("Reset playback speed to normal")),
        ("less greater", _("Go backward/forward in the playlist")),
        ("Delete", _("Remove selected playlist item")),
        ("<Ctrl><Shift>s", _("Save playlist")),
        ("l", _("Set/clear A-B loop points")),
        ("<Shift>l", _("Toggle infinite looping")),
        ("p space", _("Pause or unpause")),
        ("<Ctrl>q q", _("Quit")),
        ("<Shift>q", _("Save current playback position and quit")),
    )
    audio = _entries(
        ("numbersign", _("Cycle through audio tracks")),
        ("slash asterisk", _("Decrease/increase volume")),
        ("9 0", _("Decrease/increase volume")),
        ("m", _("Mute or unmute")),
        ("<Ctrl>plus <Ctrl>minus", _("Adjust audio delay by +/- 0.1 seconds")),
    )
    subtitle = _entries(
        ("v", _("Toggle subtitle visibility")),
        ("i j", _("Cycle through available subtitles")),
        ("x z", _("Adjust subtitle delay by +/- 0.1 seconds")),
        ("u", _("Toggle SSA/ASS subtitles style override")),
        ("r t", _("Move subtitles up/down")),
        ("<Shift>v", _("Toggle VSFilter aspect compatibility mode")),
    )
    video = _entries(
        ("underscore", _("Cycle through video tracks")),
        ("w e", _("Decrease/increase pan-and-scan range")),
        ("s", _("Take a screenshot")),
        ("<Shift>s", _("Take a screenshot, without subtitles")),
        ("<Ctrl>s", _("Take a screenshot, as the window shows it")),
        ("<Alt>0", _("Resize video to half its original size")),
        ("<Alt>1", _("Resize video to its original size")),
        ("<Alt>2", _("Resize video to double its original size")),
        ("1 2", _("Adjust contrast")),
        ("3 4", _("Adjust brightness")),
        ("5 6", _("Adjust gamma")),
        ("7 8", _("Adjust saturation")),
        ("d", _("Activate or deactivate deinterlacer")),
        ("<Shift>a", _("Cycle aspect ratio override")),
    )
    return (
        ShortcutGroup(_("User Interface"), general),
        ShortcutGroup(_("Video"), video),
        ShortcutGroup(_("Audio"), audio),
        ShortcutGroup(_("Subtitle"), subtitle),
        ShortcutGroup(_("Playback"), playback),
        ShortcutGroup(_("Seeking"), seeking),
    )


def find_shortcut(accel: str) -> ShortcutEntry | None:
    """Find the entry whose accelerator string is, or contains, ``accel``."""
    for group in shortcut_groups():
        for entry in group.entries:
            if accel == entry.accel or accel in entry.accelerators:
                return entry
    return None