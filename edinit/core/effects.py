"""Effect descriptors for the init and config bodies of a feature declaration.

Bodies are ordered lists of these records instead of opaque code so the
registration order can be inspected and tested. Declarations written as
plain tuples in ``app_constants`` are turned into effects by ``parse_effect``:

    ("set", "fill-column", 80)
    ("hook", "prog-mode-hook", "fci-mode")
    ("run", "global-whitespace-cleanup")
    ("bind", "C-c w", "whitespace-cleanup")
    ("dep", "rg", "apt-get install -y ripgrep")
"""

from dataclasses import dataclass
from typing import Any, Tuple, Union

from edinit.core.contracts.host_interface import BaseHost


@dataclass(frozen=True)
class InstallDependency:
    name: str
    hint: str

    def apply(self, host: BaseHost) -> bool:
        """Run the install hint when the executable is missing. Returns True if it ran."""
        if host.executable_found(self.name):
            return False
        host.shell_command(self.hint)
        return True

    def describe(self) -> str:
        return f"ensure system dependency {self.name} ({self.hint})"


@dataclass(frozen=True)
class RunHook:
    function: str
    args: Tuple[Any, ...] = ()

    def apply(self, host: BaseHost):
        return host.call(self.function, *self.args)

    def describe(self) -> str:
        return f"run {self.function}"


@dataclass(frozen=True)
class AddHook:
    hook: str
    function: str

    def apply(self, host: BaseHost) -> None:
        host.add_hook(self.hook, self.function)

    def describe(self) -> str:
        return f"add {self.function} to {self.hook}"


@dataclass(frozen=True)
class BindKey:
    key: str
    command: str

    def apply(self, host: BaseHost):
        return host.keymap.bind(self.key, self.command)

    def describe(self) -> str:
        return f"bind {self.key} to {self.command}"


@dataclass(frozen=True)
class SetOption:
    name: str
    value: Any

    def apply(self, host: BaseHost) -> None:
        host.set_option(self.name, self.value)

    def describe(self) -> str:
        return f"set {self.name} = {self.value!r}"


Effect = Union[InstallDependency, RunHook, AddHook, BindKey, SetOption]
EFFECT_TYPES = (InstallDependency, RunHook, AddHook, BindKey, SetOption)


def parse_effect(raw) -> Effect:
    if isinstance(raw, EFFECT_TYPES):
        return raw
    if not isinstance(raw, (tuple, list)) or not raw:
        raise ValueError(f"Effect must be a non-empty tuple, got {raw!r}")

    kind, *args = raw
    if kind == "set" and len(args) == 2:
        return SetOption(args[0], args[1])
    if kind == "hook" and len(args) == 2:
        return AddHook(args[0], args[1])
    if kind == "run" and len(args) >= 1:
        return RunHook(args[0], tuple(args[1:]))
    if kind == "bind" and len(args) == 2:
        return BindKey(args[0], args[1])
    if kind == "dep" and len(args) == 2:
        return InstallDependency(args[0], args[1])
    raise ValueError(f"Unknown effect {raw!r}")
