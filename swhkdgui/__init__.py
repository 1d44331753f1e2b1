"""Graphical configurator for swhkd hotkeys: model, key recording and Tk window."""

__version__ = "0.1.0"