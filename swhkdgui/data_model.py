"""Hotkey configuration model and swhkd config file handling."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

COMBINATION_SEPARATOR = " + "

_TRANSLATIONS = {
    "app_name": "App Name",
    "apps": "APPS",
    "key_combination": "Key Combination",
    "command": "Command",
    "active": "Active",
    "delete": "Delete",
    "record": "Record",
    "add_hotkey": "Add Hotkey",
    "add_app": "+ Add App",
    "no_apps_available": "No apps available. Please add an app.",
    "swhkd_gui_configurator": "SWHKD GUI Configurator",
    "recording": "🔴",
    "not_recording": "⎈",
}


def tr(key: str) -> str:
    """Return the display text for ``key``, or ``key`` itself if unknown."""
    return _TRANSLATIONS.get(key, key)


class ConfigError(Exception):
    """Raised when the swhkd configuration cannot be located."""


@dataclass
class Action:
    """The command a hotkey runs."""

    command: str = ""
    active: bool = True
    layer_id: int = 0


@dataclass
class Hotkey:
    """A key with its modifiers and the action bound to it."""

    key: str = ""
    modifiers: set[str] = field(default_factory=set)
    action: Action = field(default_factory=Action)

    def __str__(self) -> str:
        return COMBINATION_SEPARATOR.join([*sorted(self.modifiers), self.key])

    def set_combination(self, combination: str) -> None:
        """Replace key and modifiers from text such as ``"super + t"``."""
        *modifiers, key = combination.split(COMBINATION_SEPARATOR)
        self.key = key
        self.modifiers = set(modifiers)


@dataclass
class AppMode:
    """A named group of hotkeys."""

    name: str
    hotkeys: list[Hotkey] = field(default_factory=list)


def _default_apps() -> list[AppMode]:
    return [
        AppMode(
            name="Terminal Apps",
            hotkeys=[Hotkey(key="t", modifiers={"super"}, action=Action("alacritty"))],
        ),
        AppMode(
            name="Web Browsers",
            hotkeys=[Hotkey(key="b", modifiers={"super"}, action=Action("firefox"))],
        ),
    ]


@dataclass
class AppState:
    """Everything the configurator edits."""

    apps: list[AppMode] = field(default_factory=_default_apps)
    selected_app: int = 0
    recording_hotkey: Optional[int] = None

    def to_swhkd_format(self) -> str:
        """Render the active hotkeys as swhkdrc text."""
        lines = ["# SWHKD Configuration generated by GUI\n\n"]
        for app in self.apps:
            lines.append(f"# {app.name}\n")
            for hotkey in app.hotkeys:
                if hotkey.action.active:
                    lines.append(f"{hotkey}\n")
                    lines.append(f"    {hotkey.action.command}\n\n")
        return "".join(lines)

    def config_path(self) -> Path:
        """Location of the user's swhkdrc."""
        try:
            home = Path.home()
        except RuntimeError as exc:
            raise ConfigError("Could not find home directory") from exc
        return home / ".config" / "swhkd" / "swhkdrc"

    def save_to_swhkd_config(self) -> Path:
        """Write the config file, ask swhkd to reload it and return its path."""
        path = self.config_path()
        content = self.to_swhkd_format()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        self.reload_swhkd()
        print(f"Saved config to: {path}")
        return path

    def reload_swhkd(self) -> None:
        """Signal swhkd to reload, restarting the user service as a fallback."""
        try:
            subprocess.run(["pkill", "-USR1", "swhkd"], capture_output=True, check=False)
        except OSError:
            print("Could not signal SWHKD, trying to restart...")
            try:
                subprocess.run(
                    ["systemctl", "--user", "restart", "swhkd"],
                    capture_output=True,
                    check=False,
                )
            except OSError:
                pass
        else:
            print("Signaled SWHKD to reload")

    def load_from_swhkd_config(self) -> Optional[int]:
        """Read an existing config file; return its line count, or None if absent."""
        path = self.config_path()
        if not path.exists():
            return None
        content = path.read_text(encoding="utf-8")
        count = len(content.splitlines())
        print(f"Loaded existing config: {count} lines")
        return count