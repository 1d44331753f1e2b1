"""Turn key presses into hotkey combination text."""

from __future__ import annotations

import enum
from typing import Optional, Union

from swhkdgui.messages import KeyRecorded


class NamedKey(enum.Enum):
    """Keys that have a name rather than a character."""

    CONTROL = "Control"
    ALT = "Alt"
    SHIFT = "Shift"
    SUPER = "Super"
    ENTER = "Enter"
    TAB = "Tab"
    SPACE = "Space"
    BACKSPACE = "Backspace"
    ESCAPE = "Escape"
    DELETE = "Delete"
    INSERT = "Insert"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    CAPS_LOCK = "CapsLock"
    PRINT_SCREEN = "PrintScreen"
    AUDIO_VOLUME_UP = "AudioVolumeUp"
    AUDIO_VOLUME_DOWN = "AudioVolumeDown"
    AUDIO_VOLUME_MUTE = "AudioVolumeMute"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"


class Modifiers(enum.Flag):
    """Modifier keys held during a key press."""

    NONE = 0
    CONTROL = 1
    ALT = 2
    SHIFT = 4
    LOGO = 8


Key = Union[str, NamedKey, None]

_MODIFIER_KEYS = frozenset(
    {NamedKey.CONTROL, NamedKey.ALT, NamedKey.SHIFT, NamedKey.SUPER}
)

_MODIFIER_LABELS = (
    (Modifiers.CONTROL, "Ctrl"),
    (Modifiers.ALT, "Alt"),
    (Modifiers.SHIFT, "Shift"),
    (Modifiers.LOGO, "Super"),
)


def is_modifier_key(key: Key) -> bool:
    """True if ``key`` is itself a modifier."""
    return isinstance(key, NamedKey) and key in _MODIFIER_KEYS


def handle_keypress(key: Key, modifiers: Modifiers) -> Optional[KeyRecorded]:
    """Build a recorded combination, or None for modifiers and unknown keys."""
    if is_modifier_key(key):
        return None
    if isinstance(key, NamedKey):
        key_text = key.value
    elif isinstance(key, str):
        key_text = key
    else:
        return None
    parts = [label for flag, label in _MODIFIER_LABELS if flag in modifiers]
    parts.append(key_text)
    return KeyRecorded(" + ".join(parts))