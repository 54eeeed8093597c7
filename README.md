# gmpvkit

The logic behind a media player's window controls and desktop integration.
It needs no GUI toolkit and no bus library. You pass in your own controller,
model, view and bus objects, and the package handles the rest.

## Modules

### `gmpvkit.defs`

The player's fixed tables and identifiers:

- the application id, the MPRIS bus name, object path and track id prefix;
- `DEFAULT_KEYBINDS`;
- `KEYSTRING_MAP`, which pairs mpv key names with keysym names;
- `SUPPORTED_PROTOCOLS` and `SUPPORTED_MIME_TYPES`;
- `SUBTITLE_EXTS` and `PLAYLIST_EXTS`;
- `DND_TARGETS`, the drag-and-drop targets.

Lookups:

- `keysyms_for(mpv_key)` returns every keysym for an mpv key, in table order.
- `mpv_key_for(keysym)` returns the mpv key for a keysym. It returns `None`
  for a keysym that is not in the table, and `""` for a bare modifier.
- `has_extension(path, extensions)` checks a file's extension, ignoring case.

### `gmpvkit.seek_bar`

`format_time_label(pos, duration)` builds the label shown next to the seek
bar:

- `HH:MM:SS/HH:MM:SS` when the duration is over an hour;
- `MM:SS/MM:SS` for a shorter duration;
- `MM:SS` alone when there is no duration.

`SeekBar` keeps the position, the duration, the range, the current value and
the label:

- `set_duration` updates the range.
- `set_pos` moves the value. It refreshes the label only when the whole second
  changes.
- `change_value` calls the `on_seek` callback, but only when a duration is
  known.

### `gmpvkit.shortcuts`

`shortcut_groups()` returns the keyboard shortcut reference as `ShortcutGroup`
objects, each holding `ShortcutEntry` items. Titles go through `gettext`.
`find_shortcut(accel)` finds the entry that lists an accelerator.

### `gmpvkit.mpris`

- `module`:
  - `Observable` is a small signal source with `connect`, `disconnect` and
    `emit`.
  - `MessageBus` keeps registered objects and emitted signals. Each signal is
    recorded as an `EmittedSignal`.
  - `MprisModule` is the base of every interface. It holds the property table
    and announces each change as `PropertiesChanged`, sending either the new
    values or invalidated names.
- `base`: `MprisBase`, the root interface. It handles Raise, Quit and the
  Fullscreen property.
- `player`: `MprisPlayer`, the Player interface. It covers playback methods,
  Seek and SetPosition, OpenUri, loop, rate, volume and metadata, and emits
  `Seeked` on playback restart. Helper functions: `playback_status`,
  `loop_status`, `build_metadata_tags`.
- `track_list`: `MprisTrackList`, a read-only TrackList interface. It has a
  window of up to ten tracks before and after the current one, and emits
  `TrackListReplaced` and `TrackMetadataChanged`. Helper functions:
  `track_id`, `track_id_to_index`, `tracks_window`, `playlist_entry_metadata`,
  `get_tracks_metadata`.
- `service`:
  - `Mpris` names the service `…instance-<window id>`.
  - `name_acquired` creates and registers the three interfaces.
  - `name_lost` unregisters them.
  - `dispose` unregisters and drops them.
  - `build_string_array` collects strings up to the first `None`.

### `gmpvkit.media_keys.keys`

`MediaKeys` turns media key presses from the desktop settings daemon into mpv
key presses:

- `proxy_ready` takes the proxy and grabs the keys.
- `handle_signal` presses the key for a `MediaPlayerKeyPressed` signal
  addressed to this application.
- `window_state_changed` grabs the keys again when the window gains focus.

`translate_key` maps one key name.

## Example

```python
from gmpvkit.seek_bar import SeekBar, format_time_label

print(format_time_label(75, 4000))   # 00:01:15/01:06:40

bar = SeekBar(on_seek=lambda value: print("seek to", value))
bar.set_duration(120)
bar.change_value(30)                 # prints "seek to 30"
```

## What it does not do

- It plays no media and draws no window.
- It opens no real D-Bus connection. `MessageBus` only records what is
  registered and emitted on it, so a real bus has to be wired in by the
  caller.
- It has no command-line program.

## Tests

```
pip install -e .[test]
pytest
```