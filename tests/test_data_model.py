import subprocess
from unittest import mock

import pytest

from swhkdgui.data_model import Action, AppMode, AppState, Hotkey, tr


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


def test_tr_known_and_fallback():
    assert tr("apps") == "APPS"
    assert tr("add_app") == "+ Add App"
    assert tr("unknown_key") == "unknown_key"


def test_hotkey_str_without_modifiers():
    assert str(Hotkey(key="t")) == "t"


def test_hotkey_str_sorts_modifiers():
    hotkey = Hotkey(key="t", modifiers={"super", "alt"})
    assert str(hotkey) == "alt + super + t"


def test_set_combination_round_trip():
    hotkey = Hotkey()
    hotkey.set_combination("ctrl + shift + x")
    assert hotkey.key == "x"
    assert hotkey.modifiers == {"ctrl", "shift"}
    assert str(hotkey) == "ctrl + shift + x"


def test_set_combination_plain_key_clears_modifiers():
    hotkey = Hotkey(key="t", modifiers={"super"})
    hotkey.set_combination("q")
    assert hotkey.key == "q"
    assert hotkey.modifiers == set()


def test_set_combination_keeps_action():
    hotkey = Hotkey(key="t", action=Action("alacritty", False, 2))
    hotkey.set_combination("super + t")
    assert hotkey.action == Action("alacritty", False, 2)


def test_default_state():
    state = AppState()
    assert [app.name for app in state.apps] == ["Terminal Apps", "Web Browsers"]
    assert state.selected_app == 0
    assert state.recording_hotkey is None
    assert state.apps[0].hotkeys[0].action.command == "alacritty"


def test_default_states_do_not_share_apps():
    first = AppState()
    second = AppState()
    first.apps.append(AppMode(name="Extra"))
    assert len(second.apps) == len(first.apps) - 1


def test_to_swhkd_format_default():
    expected = (
        "# SWHKD Configuration generated by GUI\n\n"
        "# Terminal Apps\n"
        "super + t\n"
        "    alacritty\n\n"
        "# Web Browsers\n"
        "super + b\n"
        "    firefox\n\n"
    )
    assert AppState().to_swhkd_format() == expected


def test_to_swhkd_format_skips_inactive():
    state = AppState()
    state.apps[0].hotkeys[0].action.active = False
    text = state.to_swhkd_format()
    assert "# Terminal Apps\n" in text
    assert "alacritty" not in text
    assert "firefox" in text


def test_to_swhkd_format_without_modifiers():
    state = AppState(apps=[AppMode("Misc", [Hotkey(key="F1", action=Action("htop"))])])
    assert state.to_swhkd_format().endswith("# Misc\nF1\n    htop\n\n")


def test_config_path(home):
    assert AppState().config_path() == home / ".config" / "swhkd" / "swhkdrc"


def test_save_writes_file_and_signals(home):
    state = AppState()
    with mock.patch("swhkdgui.data_model.subprocess.run") as run:
        path = state.save_to_swhkd_config()
    assert path.read_text(encoding="utf-8") == state.to_swhkd_format()
    assert run.call_args.args[0] == ["pkill", "-USR1", "swhkd"]


def test_reload_falls_back_to_systemctl():
    with mock.patch(
        "swhkdgui.data_model.subprocess.run",
        side_effect=[FileNotFoundError(), subprocess.CompletedProcess([], 0)],
    ) as run:
        result = AppState().reload_swhkd()
    assert result is None
    assert run.call_count == 2
    assert run.call_args.args[0] == ["systemctl", "--user", "restart", "swhkd"]


def test_reload_ignores_missing_systemctl():
    with mock.patch(
        "swhkdgui.data_model.subprocess.run",
        side_effect=[FileNotFoundError(), FileNotFoundError()],
    ) as run:
        assert AppState().reload_swhkd() is None
    assert run.call_count == 2


def test_load_missing_config(home):
    assert AppState().load_from_swhkd_config() is None


def test_load_existing_config_counts_lines(home):
    state = AppState()
    path = state.config_path()
    path.parent.mkdir(parents=True)
    path.write_text("super + t\n    alacritty\n\n", encoding="utf-8")
    assert state.load_from_swhkd_config() == 3