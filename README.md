# swhkdgui

A small desktop configurator for the swhkd hotkey daemon. Hotkeys are grouped
by application; for each one you set a key combination, the command it runs,
and whether it is active. Saving writes the active bindings to
`~/.config/swhkd/swhkdrc` and asks a running swhkd to reload it with
`pkill -USR1 swhkd`. If `pkill` cannot be started at all, it runs
`systemctl --user restart swhkd` instead.

## Installation

```
pip install .
```

The window uses tkinter from the standard library. No other packages are
needed.

## Running

```
swhkdgui
```

`python -m swhkdgui.interface` does the same. The window has two panels.

The left panel lists the applications. "+ Add App" creates a new one named
`App N` and selects it.

The right panel shows the selected application's name, which you can edit,
and a table of its hotkeys. Each row has these columns:

- **Key Combination**: typed as `super + t`. Parts are separated by ` + `.
  The last part is the key and the rest are modifiers.
- **Command**: what swhkd runs.
- **Active**: only active hotkeys are written to the config.
- **Delete**: removes the row.
- **Record**: press ⎈, then press a key combination. The button shows 🔴
  while recording. Recorded modifiers are written as `Ctrl`, `Alt`, `Shift`
  and `Super`, for example `Ctrl + Shift + a`.

"Add Hotkey" appends an empty, active row. "💾 Save & Apply to System"
writes the config file and signals swhkd. The outcome is printed to standard
output.

The generated file starts with a comment line. Each application gets a
`# <name>` line. Each active hotkey follows as a combination line, with its
modifiers in sorted order, and then its command indented by four spaces.

## Using the model directly

```python
from swhkdgui.data_model import AppState

state = AppState()              # starts with "Terminal Apps" and "Web Browsers"
print(state.to_swhkd_format())
path = state.save_to_swhkd_config()   # returns the path written
```

The library is split into these parts:

- `swhkdgui.app.Configurator` applies the messages from `swhkdgui.messages`,
  such as `AddHotkey`, `EditKey` or `KeyRecorded`, to an `AppState`.
- `swhkdgui.key_recording.handle_keypress(key, modifiers)` takes a character
  or `NamedKey` and a `Modifiers` flag set. It returns a `KeyRecorded` message
  holding a combination such as `Ctrl + Shift + a`. It returns `None` for
  modifier keys alone.
- `swhkdgui.interface.hotkey_rows(state)` gives the rows the table displays.

## Limitations

- An existing `swhkdrc` is not read back into the editor. At start-up the
  package only checks for the file and prints its line count. The editor
  always begins with the two default applications.
- Saving overwrites the whole `swhkdrc`.
- Inactive hotkeys are not written to the file, so they are lost once you
  save.
- The editor's state is not stored anywhere else.

## Tests

```
pip install ".[test]"
pytest
```