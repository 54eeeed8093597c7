"""Forwarding of desktop settings-daemon media keys to mpv key presses."""