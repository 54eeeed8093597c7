"""Seek bar state: playback position, duration and the time label."""

from __future__ import annotations

from collections.abc import Callable


def _ctrunc(value: float) -> int:
    return int(value)


def _cdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _cmod(a: int, b: int) -> int:
    return a - b * _cdiv(a, b)


def _mmss(seconds: int) -> str:
    return f"{_cdiv(_cmod(seconds, 3600), 60):02d}:{_cmod(seconds, 60):02d}"


def _hhmmss(seconds: int) -> str:
    return f"{_cdiv(seconds, 3600):02d}:{_mmss(seconds)}"


def format_time_label(pos: float, duration: float) -> str:
    """Format the position/duration label shown next to the seek bar.

    Durations over an hour use hours, shorter ones minutes and seconds, and a
    missing duration shows the position alone.
    """
    sec = _ctrunc(pos)
    length = _ctrunc(duration)

    if length > 3600:
        return f"{_hhmmss(sec)}/{_hhmmss(length)}"
    if length > 0:
        return f"{_mmss(sec)}/{_mmss(length)}"
    return _mmss(sec)


class SeekBar:
    """A horizontal seek range with a time label; reports user seeks."""

    step = 10

    def __init__(self, on_seek: Callable[[float], None] | None = None) -> None:
        self.on_seek = on_seek
        self.pos = 0.0
        self.duration = 0.0
        self.lower = 0.0
        self.upper = 0.0
        self.value = 0.0
        self.label = ""
        self._update_label()

    def _update_label(self) -> None:
        self.label = format_time_label(self.pos, self.duration)

    def set_duration(self, duration: float) -> None:
        """Set the duration, refresh the label and the seek range."""
        self.duration = duration
        self._update_label()
        self.lower, self.upper = 0.0, duration
        self.value = min(max(self.value, self.lower), self.upper)

    def set_pos(self, pos: float) -> None:
        """Move the bar; the label changes only when the whole second does."""
        old_pos = self.pos
        self.pos = pos
        self.value = min(max(pos, self.lower), self.upper)
        if _ctrunc(old_pos) != _ctrunc(pos):
            self._update_label()

    def change_value(self, value: float) -> bool:
        """Handle a user move of the bar; return whether a seek was reported."""
        if self.duration > 0:
            self._update_label()
            if self.on_seek is not None:
                self.on_seek(value)
            return True
        return False