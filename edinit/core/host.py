import re
import sched
import shutil
import subprocess
import time
import webbrowser
from typing import Callable, Dict, List, Optional

from edinit.core.contracts.host_interface import BaseHost
from edinit.core.keymap import Keymap
from edinit.core.package_store import PackageStore
from edinit.core.settings import EditorSettings

FILL_COLUMN_INDICATOR = "│"


# BUILT-IN COMMANDS
def delete_trailing_whitespace(host: "EditorHost") -> None:
    lines = host.buffer.split("\n")
    host.buffer = "\n".join(re.sub(r"[ \t]+$", "", line) for line in lines)
    host.point = min(host.point, len(host.buffer))

def load_theme(host: "EditorHost", theme: str) -> None:
    host.set_option("theme", theme)
# ==================================


class EditorHost(BaseHost):
    """The editor process an init script configures.

    Keeps editor-wide state (settings, the global keymap, commands, hooks,
    faces, the current buffer) and talks to the outside world through the
    package store, the shell and the system browser.
    """

    def __init__(self, store: PackageStore, settings: Optional[EditorSettings] = None, keymap: Optional[Keymap] = None):
        self.store = store
        self.settings = settings or EditorSettings()
        self.keymap = keymap or Keymap("global")
        self.commands: Dict[str, Callable] = {}
        self.hooks: Dict[str, List[str]] = {}
        self.features = set()
        self.modes = set()
        self.major_mode = "fundamental-mode"
        self.faces: Dict[str, Dict[str, bool]] = {"mode-line": {"inverse": False}}
        self.timers = sched.scheduler(time.monotonic, time.sleep)
        self.buffer = ""
        self.point = 0

        self.define_command("delete-trailing-whitespace", delete_trailing_whitespace)
        self.define_command("load-theme", load_theme)

    # ***** PACKAGES *****
    def is_installed(self, package: str, version: str = "v1_0") -> bool:
        return self.store.is_installed(package, version)

    def install_package(self, package: str) -> None:
        self.store.install(package)

    def load_package(self, package: str, version: str = "v1_0") -> dict:
        return self.store.load(package, version)

    def provide(self, feature: str) -> None:
        self.features.add(feature)

    def featurep(self, feature: str) -> bool:
        return feature in self.features

    # ***** SYSTEM *****
    def executable_found(self, name: str) -> bool:
        return shutil.which(name) is not None

    def shell_command(self, command: str) -> str:
        result = subprocess.run(
            command,
            shell=True,
            capture_output=True,
            text=True,
            check=True,
            stdin=subprocess.DEVNULL,
        )
        return result.stdout

    def browse_url(self, url: str) -> None:
        webbrowser.open(url)

    # ***** EDITOR STATE *****
    def set_option(self, name: str, value) -> None:
        self.settings.set(name, value)

    def define_command(self, name: str, command: Callable) -> None:
        if not callable(command):
            raise ValueError(f"Command '{name}' must be callable")
        self.commands[name] = command

    def call(self, name: str, *args):
        command = self.commands.get(name)
        if command is None:
            raise KeyError(f"Unknown command '{name}'")
        return command(self, *args)

    def add_hook(self, hook: str, function: str) -> None:
        functions = self.hooks.setdefault(hook, [])
        if function not in functions:
            functions.append(function)

    def remove_hook(self, hook: str, function: str) -> None:
        functions = self.hooks.get(hook, [])
        if function in functions:
            functions.remove(function)

    def run_hooks(self, hook: str) -> None:
        for function in list(self.hooks.get(hook, [])):
            self.call(function)

    def set_major_mode(self, mode: str) -> None:
        self.major_mode = mode
        self.run_hooks(f"{mode}-hook")

    def press(self, key):
        command = self.keymap.lookup(key)
        if command is None:
            print(f"{key} is undefined")
            return None
        return self.call(command)

    # ***** DISPLAY *****
    def ding(self) -> None:
        style = self.settings.bell_style
        if style == "visible" and "flash-mode-line" in self.commands:
            self.call("flash-mode-line")
        elif style != "none":
            print("\a", end="", flush=True)

    def invert_face(self, face: str) -> None:
        attributes = self.faces.setdefault(face, {"inverse": False})
        attributes["inverse"] = not attributes["inverse"]

    def run_with_timer(self, delay: float, function: Callable, *args) -> None:
        self.timers.enter(delay, 1, function, args)

    def process_timers(self, blocking: bool = False) -> None:
        self.timers.run(blocking=blocking)

    def render_buffer(self) -> str:
        lines = self.buffer.split("\n")
        fill_column = self.settings.fill_column
        width = len(str(len(lines)))
        rendered = []
        for number, line in enumerate(lines, start=1):
            if "fci-mode" in self.modes and len(line) < fill_column:
                line = line.ljust(fill_column) + FILL_COLUMN_INDICATOR
            if self.settings.line_numbers:
                line = f"{number:>{width}} {line}"
            rendered.append(line)
        return "\n".join(rendered)

    # ***** INTERACTION *****
    def text_at_point(self) -> str:
        start = self.point
        while start > 0 and not self.buffer[start - 1].isspace():
            start -= 1
        end = self.point
        while end < len(self.buffer) and not self.buffer[end].isspace():
            end += 1
        return self.buffer[start:end]

    def read_string(self, prompt: str, default: str = "") -> str:
        suffix = f"(default {default}) " if default else ""
        value = input(f"{prompt}{suffix}")
        return value or default

    def save_buffer(self, path: str) -> None:
        if self.settings.trim_whitespace:
            self.call("delete-trailing-whitespace")
        self.run_hooks("before-save-hook")
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(self.buffer)
