import dataclasses

import pytest

from swhkdgui.messages import (
    AddApp,
    AddHotkey,
    DeleteHotkey,
    EditCommand,
    EditKey,
    KeyRecorded,
    SaveConfig,
    SelectApp,
    StopRecording,
    ToggleActive,
)


def test_messages_compare_by_value():
    assert EditKey(1, "a") == EditKey(1, "a")
    assert (EditKey(1, "a") == EditKey(2, "a")) is False


def test_messages_are_frozen():
    message = SelectApp(2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        message.index = 3
    assert message.index == 2
    assert message == SelectApp(2)


def test_field_access():
    assert KeyRecorded("Ctrl + a").combination == "Ctrl + a"
    assert ToggleActive(0, False).active is False
    assert EditCommand(4, "firefox").value == "firefox"


def test_unit_messages_hash_by_type():
    messages = {AddHotkey(), AddHotkey(), AddApp(), SaveConfig(), StopRecording()}
    assert len(messages) == 4


def test_pattern_matching():
    def describe(message):
        match message:
            case DeleteHotkey(index=i):
                return i
            case _:
                return None

    assert describe(DeleteHotkey(5)) == 5
    assert describe(AddApp()) is None