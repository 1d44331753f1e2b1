import pytest

from swhkdgui.data_model import Action, AppMode, AppState, Hotkey, tr
from swhkdgui.interface import (
    HotkeyRow,
    _key_from_keysym,
    _modifiers_from_state,
    hotkey_rows,
    recording_indicator,
)
from swhkdgui.key_recording import Modifiers, NamedKey, handle_keypress


def test_default_state_rows():
    rows = hotkey_rows(AppState())
    assert rows == [
        HotkeyRow(
            index=0,
            key_display="super + t",
            command="alacritty",
            active=True,
            indicator="⎈",
        )
    ]


def test_rows_follow_selected_app():
    state = AppState(selected_app=1)
    rows = hotkey_rows(state)
    assert [row.command for row in rows] == ["firefox"]
    assert rows[0].key_display == "super + b"


def test_rows_empty_without_apps():
    assert hotkey_rows(AppState(apps=[])) == []


def test_rows_match_hotkey_text_and_order():
    hotkeys = [
        Hotkey(key="x", modifiers={"shift", "alt"}, action=Action("one")),
        Hotkey(key="y", action=Action("two", active=False)),
    ]
    state = AppState(apps=[AppMode(name="A", hotkeys=hotkeys)])
    rows = hotkey_rows(state)
    assert [row.index for row in rows] == [0, 1]
    assert [row.key_display for row in rows] == [str(h) for h in hotkeys]
    assert rows[1].key_display == "y"
    assert [row.active for row in rows] == [True, False]


def test_recording_indicator_marks_only_recorded_row():
    state = AppState(recording_hotkey=0)
    assert recording_indicator(state, 0) == tr("recording")
    assert recording_indicator(state, 1) == tr("not_recording")
    assert hotkey_rows(state)[0].indicator == "🔴"


def test_recording_indicator_idle():
    assert recording_indicator(AppState(), 0) == "⎈"


@pytest.mark.parametrize(
    "keysym, expected",
    [
        ("Control_L", NamedKey.CONTROL),
        ("Shift_R", NamedKey.SHIFT),
        ("Super_L", NamedKey.SUPER),
        ("Return", NamedKey.ENTER),
        ("F5", NamedKey.F5),
        ("Escape", NamedKey.ESCAPE),
    ],
)
def test_named_keysyms(keysym, expected):
    assert _key_from_keysym(keysym, "") == expected


def test_character_keysym():
    assert _key_from_keysym("a", "a") == "a"


def test_unknown_keysym_without_char():
    assert _key_from_keysym("XF86Unknown", "") is None


def test_modifiers_from_state():
    assert _modifiers_from_state(0x4 | 0x1) == Modifiers.CONTROL | Modifiers.SHIFT
    assert _modifiers_from_state(0) == Modifiers.NONE


def test_event_to_recorded_combination():
    message = handle_keypress(_key_from_keysym("t", "t"), _modifiers_from_state(0x40))
    assert message.combination == "Super + t"


def test_modifier_press_records_nothing():
    key = _key_from_keysym("Control_L", "")
    assert handle_keypress(key, _modifiers_from_state(0x4)) is None