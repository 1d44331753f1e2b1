"""The configurator's state machine: applies messages to the app state."""

from __future__ import annotations

from typing import Optional

from swhkdgui.data_model import AppMode, AppState, ConfigError, Hotkey
from swhkdgui.messages import (
    AddApp,
    AddHotkey,
    DeleteHotkey,
    EditAppName,
    EditCommand,
    EditKey,
    KeyRecorded,
    Message,
    SaveConfig,
    SelectApp,
    StartRecording,
    StopRecording,
    ToggleActive,
)


class Configurator:
    """Holds the app state and updates it in response to messages."""

    def __init__(self, state: Optional[AppState] = None) -> None:
        if state is None:
            state = AppState()
            try:
                state.load_from_swhkd_config()
            except (OSError, ConfigError):
                pass
        self.state = state

    def title(self) -> str:
        return "SWHKD GUI Configurator"

    def wants_key_events(self) -> bool:
        """True while a hotkey is being recorded."""
        return self.state.recording_hotkey is not None

    def _current_app(self) -> AppMode:
        return self.state.apps[self.state.selected_app]

    def _hotkey(self, index: int) -> Optional[Hotkey]:
        hotkeys = self._current_app().hotkeys
        return hotkeys[index] if 0 <= index < len(hotkeys) else None

    def update(self, message: Message) -> None:
        state = self.state
        match message:
            case SelectApp(index=index):
                state.selected_app = index
            case EditAppName(name=name):
                self._current_app().name = name
            case EditKey(index=index, value=value):
                if (hotkey := self._hotkey(index)) is not None:
                    hotkey.set_combination(value)
            case EditCommand(index=index, value=value):
                if (hotkey := self._hotkey(index)) is not None:
                    hotkey.action.command = value
            case ToggleActive(index=index, active=active):
                if (hotkey := self._hotkey(index)) is not None:
                    hotkey.action.active = active
            case DeleteHotkey(index=index):
                if self._hotkey(index) is not None:
                    del self._current_app().hotkeys[index]
            case AddHotkey():
                self._current_app().hotkeys.append(Hotkey())
            case AddApp():
                state.apps.append(AppMode(name=f"App {len(state.apps) + 1}"))
                state.selected_app = len(state.apps) - 1
            case StartRecording(index=index):
                state.recording_hotkey = index
            case KeyRecorded(combination=combination):
                index = state.recording_hotkey
                if index is not None:
                    state.recording_hotkey = None
                    if (hotkey := self._hotkey(index)) is not None:
                        hotkey.set_combination(combination)
            case StopRecording():
                state.recording_hotkey = None
            case SaveConfig():
                try:
                    state.save_to_swhkd_config()
                except (OSError, ConfigError) as exc:
                    print(f"❌ Error saving config: {exc}")
                else:
                    print("✅ Configuration saved and applied to SWHKD!")