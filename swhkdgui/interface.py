"""Tk window for editing hotkeys and the rows it displays."""

from __future__ import annotations

import argparse
import tkinter as tk
from dataclasses import dataclass
from functools import partial
from tkinter import ttk
from typing import Optional, Sequence

from swhkdgui.app import Configurator
from swhkdgui.data_model import AppState, tr
from swhkdgui.key_recording import Key, Modifiers, NamedKey, handle_keypress
from swhkdgui.messages import (
    AddApp,
    AddHotkey,
    DeleteHotkey,
    EditAppName,
    EditCommand,
    EditKey,
    Message,
    SaveConfig,
    SelectApp,
    StartRecording,
    ToggleActive,
)

_KEYSYM_NAMES = {
    "Control_L": NamedKey.CONTROL,
    "Control_R": NamedKey.CONTROL,
    "Alt_L": NamedKey.ALT,
    "Alt_R": NamedKey.ALT,
    "Meta_L": NamedKey.ALT,
    "Meta_R": NamedKey.ALT,
    "Shift_L": NamedKey.SHIFT,
    "Shift_R": NamedKey.SHIFT,
    "Super_L": NamedKey.SUPER,
    "Super_R": NamedKey.SUPER,
    "Return": NamedKey.ENTER,
    "KP_Enter": NamedKey.ENTER,
    "space": NamedKey.SPACE,
    "BackSpace": NamedKey.BACKSPACE,
    "Prior": NamedKey.PAGE_UP,
    "Next": NamedKey.PAGE_DOWN,
    "Up": NamedKey.ARROW_UP,
    "Down": NamedKey.ARROW_DOWN,
    "Left": NamedKey.ARROW_LEFT,
    "Right": NamedKey.ARROW_RIGHT,
    "Caps_Lock": NamedKey.CAPS_LOCK,
    "Print": NamedKey.PRINT_SCREEN,
    "XF86AudioRaiseVolume": NamedKey.AUDIO_VOLUME_UP,
    "XF86AudioLowerVolume": NamedKey.AUDIO_VOLUME_DOWN,
    "XF86AudioMute": NamedKey.AUDIO_VOLUME_MUTE,
}

_STATE_FLAGS = (
    (0x0001, Modifiers.SHIFT),
    (0x0004, Modifiers.CONTROL),
    (0x0008, Modifiers.ALT),
    (0x0040, Modifiers.LOGO),
)


def _key_from_keysym(keysym: str, char: str) -> Key:
    """Map a Tk keysym and character to a recordable key."""
    if keysym in _KEYSYM_NAMES:
        return _KEYSYM_NAMES[keysym]
    try:
        return NamedKey(keysym)
    except ValueError:
        pass
    if len(char) == 1 and char.isprintable():
        return char
    return None


def _modifiers_from_state(state: int) -> Modifiers:
    """Map a Tk event state bit mask to modifier flags."""
    modifiers = Modifiers.NONE
    for bit, flag in _STATE_FLAGS:
        if state & bit:
            modifiers |= flag
    return modifiers


@dataclass(frozen=True)
class HotkeyRow:
    """What one hotkey line of the table shows."""

    index: int
    key_display: str
    command: str
    active: bool
    indicator: str


def recording_indicator(state: AppState, index: int) -> str:
    """The record button's label for the hotkey at ``index``."""
    return tr("recording") if state.recording_hotkey == index else tr("not_recording")


def hotkey_rows(state: AppState) -> list[HotkeyRow]:
    """Rows for the hotkeys of the selected app; empty when there are no apps."""
    if not state.apps:
        return []
    app = state.apps[state.selected_app]
    return [
        HotkeyRow(
            index=index,
            key_display=str(hotkey),
            command=hotkey.action.command,
            active=hotkey.action.active,
            indicator=recording_indicator(state, index),
        )
        for index, hotkey in enumerate(app.hotkeys)
    ]


_COLUMN_WEIGHTS = (3, 4, 1, 1, 1)


class ConfiguratorWindow:
    """Main window: app list on the left, hotkey table on the right."""

    def __init__(self, root: tk.Misc, app: Configurator) -> None:
        self.root = root
        self.app = app
        self._frame: Optional[ttk.Frame] = None
        self._app_buttons: list[tk.Button] = []
        if isinstance(root, (tk.Tk, tk.Toplevel)):
            root.title(app.title())
        root.bind("<KeyPress>", self._on_key_press, add="+")
        self.refresh()

    def _send(self, message: Message, rebuild: bool = True) -> None:
        self.app.update(message)
        if rebuild:
            self.refresh()

    def _on_key_press(self, event: tk.Event) -> Optional[str]:
        if not self.app.wants_key_events():
            return None
        message = handle_keypress(
            _key_from_keysym(event.keysym, event.char or ""),
            _modifiers_from_state(int(event.state)),
        )
        if message is not None:
            self._send(message)
        return "break"

    def refresh(self) -> None:
        """Rebuild every widget from the current state."""
        if self._frame is not None:
            self._frame.destroy()
        self._app_buttons = []
        frame = ttk.Frame(self.root, padding=25)
        frame.pack(fill=tk.BOTH, expand=True)
        self._frame = frame

        state = self.app.state
        if not state.apps:
            ttk.Label(frame, text=tr("no_apps_available"), padding=40).place(
                relx=0.5, rely=0.5, anchor=tk.CENTER
            )
            return

        frame.columnconfigure(0, weight=1)
        frame.columnconfigure(2, weight=3)
        frame.rowconfigure(0, weight=1)
        self._build_app_list(frame).grid(row=0, column=0, sticky="nsew")
        ttk.Separator(frame, orient=tk.VERTICAL).grid(row=0, column=1, sticky="ns")
        self._build_right_panel(frame).grid(row=0, column=2, sticky="nsew", padx=25)

    def _build_app_list(self, parent: tk.Misc) -> ttk.Frame:
        state = self.app.state
        panel = ttk.Frame(parent)
        ttk.Label(panel, text=tr("apps"), font=("TkDefaultFont", 16), padding=20).pack(
            fill=tk.X
        )
        body = ttk.Frame(panel, padding=20)
        body.pack(fill=tk.BOTH, expand=True, pady=(15, 0))
        for index, mode in enumerate(state.apps):
            selected = index == state.selected_app
            button = tk.Button(
                body,
                text=mode.name,
                relief=tk.SUNKEN if selected else tk.RAISED,
                pady=8,
                command=partial(self._send, SelectApp(index)),
            )
            button.pack(fill=tk.X)
            self._app_buttons.append(button)
        ttk.Frame(body, height=15).pack()
        ttk.Button(body, text=tr("add_app"), command=partial(self._send, AddApp())).pack(
            fill=tk.X
        )
        return panel

    def _build_right_panel(self, parent: tk.Misc) -> ttk.Frame:
        state = self.app.state
        selected = state.apps[state.selected_app]
        panel = ttk.Frame(parent)

        settings = ttk.Frame(panel, padding=20, relief=tk.GROOVE)
        settings.pack(fill=tk.X)
        ttk.Label(settings, text="Application Settings", font=("TkDefaultFont", 14)).pack(
            anchor=tk.W, pady=(0, 10)
        )
        name_var = tk.StringVar(master=settings, value=selected.name)
        name_entry = ttk.Entry(settings, textvariable=name_var)
        name_entry.pack(fill=tk.X)
        name_entry.bind("<KeyRelease>", partial(self._on_name_edit, name_var))

        ttk.Label(panel, text="Hotkey Configuration", font=("TkDefaultFont", 14)).pack(
            anchor=tk.W, pady=(20, 15)
        )

        header = ttk.Frame(panel, padding=15, relief=tk.GROOVE)
        header.pack(fill=tk.X)
        self._configure_columns(header)
        for column, key in enumerate(
            ("key_combination", "command", "active", "delete", "record")
        ):
            ttk.Label(header, text=tr(key)).grid(row=0, column=column, sticky="w", padx=10)

        table = self._build_hotkey_table(panel)
        table.pack(fill=tk.BOTH, expand=True, pady=(10, 20))

        controls = ttk.Frame(panel, padding=20)
        controls.pack(fill=tk.X)
        ttk.Button(
            controls, text=tr("add_hotkey"), command=partial(self._send, AddHotkey())
        ).pack(side=tk.LEFT, padx=(0, 20))
        ttk.Button(
            controls,
            text="💾 Save & Apply to System",
            command=partial(self._send, SaveConfig(), False),
        ).pack(side=tk.LEFT)
        return panel

    @staticmethod
    def _configure_columns(frame: tk.Misc) -> None:
        for column, weight in enumerate(_COLUMN_WEIGHTS):
            frame.columnconfigure(column, weight=weight, uniform="hotkeys")

    def _build_hotkey_table(self, parent: tk.Misc) -> ttk.Frame:
        outer = ttk.Frame(parent)
        canvas = tk.Canvas(outer, highlightthickness=0)
        scrollbar = ttk.Scrollbar(outer, orient=tk.VERTICAL, command=canvas.yview)
        canvas.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        inner = ttk.Frame(canvas)
        window_id = canvas.create_window((0, 0), window=inner, anchor=tk.NW)
        inner.bind(
            "<Configure>", lambda _e: canvas.configure(scrollregion=canvas.bbox("all"))
        )
        canvas.bind(
            "<Configure>", lambda e: canvas.itemconfigure(window_id, width=e.width)
        )

        for row in hotkey_rows(self.app.state):
            self._build_hotkey_row(inner, row).pack(fill=tk.X, pady=(0, 8))
        return outer

    def _build_hotkey_row(self, parent: tk.Misc, row: HotkeyRow) -> ttk.Frame:
        line = ttk.Frame(parent, padding=12, relief=tk.GROOVE)
        self._configure_columns(line)

        key_var = tk.StringVar(master=line, value=row.key_display)
        key_entry = ttk.Entry(line, textvariable=key_var)
        key_entry.grid(row=0, column=0, sticky="ew", padx=10)
        key_entry.bind(
            "<KeyRelease>",
            lambda _e, i=row.index, v=key_var: self._send(EditKey(i, v.get()), False),
        )

        command_var = tk.StringVar(master=line, value=row.command)
        command_entry = ttk.Entry(line, textvariable=command_var)
        command_entry.grid(row=0, column=1, sticky="ew", padx=10)
        command_entry.bind(
            "<KeyRelease>",
            lambda _e, i=row.index, v=command_var: self._send(
                EditCommand(i, v.get()), False
            ),
        )

        active_var = tk.BooleanVar(master=line, value=row.active)
        ttk.Checkbutton(
            line,
            variable=active_var,
            command=lambda i=row.index, v=active_var: self._send(
                ToggleActive(i, v.get()), False
            ),
        ).grid(row=0, column=2)

        ttk.Button(
            line, text=tr("delete"), command=partial(self._send, DeleteHotkey(row.index))
        ).grid(row=0, column=3, padx=10)

        ttk.Button(
            line, text=row.indicator, command=partial(self._start_recording, row.index)
        ).grid(row=0, column=4, padx=10)
        return line

    def _on_name_edit(self, name_var: tk.StringVar, _event: tk.Event) -> None:
        name = name_var.get()
        self._send(EditAppName(name), False)
        selected = self.app.state.selected_app
        if 0 <= selected < len(self._app_buttons):
            self._app_buttons[selected].configure(text=name)

    def _start_recording(self, index: int) -> None:
        self._send(StartRecording(index))
        # Keep key presses away from the entries while recording.
        self.root.focus_set()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the configurator window."""
    parser = argparse.ArgumentParser(
        prog="swhkdgui", description="Edit swhkd hotkeys in a window."
    )
    parser.parse_args(argv)
    root = tk.Tk()
    root.geometry("1100x700")
    ConfiguratorWindow(root, Configurator())
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())