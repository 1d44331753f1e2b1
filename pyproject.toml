[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swhkdgui"
version = "0.1.0"
description = "Graphical configurator for swhkd hotkeys: edit per-application key bindings and write them to swhkdrc"
requires-python = ">=3.10"
dependencies = []
keywords = ["swhkd", "hotkeys", "keybindings", "wayland", "configuration", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers :: Applets",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
swhkdgui = "swhkdgui.interface:main"

[tool.hatch.build.targets.wheel]
packages = ["swhkdgui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
