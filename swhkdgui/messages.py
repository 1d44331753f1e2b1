"""Messages sent from the interface to the configurator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class SelectApp:
    index: int


@dataclass(frozen=True)
class EditAppName:
    name: str


@dataclass(frozen=True)
class EditKey:
    index: int
    value: str


@dataclass(frozen=True)
class EditCommand:
    index: int
    value: str


@dataclass(frozen=True)
class ToggleActive:
    index: int
    active: bool


@dataclass(frozen=True)
class DeleteHotkey:
    index: int


@dataclass(frozen=True)
class AddHotkey:
    pass


@dataclass(frozen=True)
class StartRecording:
    index: int


@dataclass(frozen=True)
class KeyRecorded:
    combination: str


@dataclass(frozen=True)
class StopRecording:
    pass


@dataclass(frozen=True)
class AddApp:
    pass


@dataclass(frozen=True)
class SaveConfig:
    pass


Message = Union[
    SelectApp,
    EditAppName,
    EditKey,
    EditCommand,
    ToggleActive,
    DeleteHotkey,
    AddHotkey,
    StartRecording,
    KeyRecorded,
    StopRecording,
    AddApp,
    SaveConfig,
]