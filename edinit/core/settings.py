import json
import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Iterable, List, Optional

BELL_STYLES = ("audible", "visible", "none")


@dataclass(frozen=True)
class Setting:
    name: str
    value: Any


@dataclass
class EditorSettings:
    """Editor-wide options, populated once at startup and read by the host afterwards.

    Setting names use the editor's kebab-case spelling (``fill-column``); the
    known ones map onto the typed fields below, everything else lands in
    ``extra``.
    """

    line_numbers: bool = False
    bell_style: str = "audible"
    trim_whitespace: bool = False
    theme: Optional[str] = None
    fill_column: int = 70
    indent_tabs: bool = True
    startup_screen: bool = True
    extra: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def attribute_for(name: str) -> str:
        return name.replace("-", "_")

    def known(self, name: str) -> bool:
        attr = self.attribute_for(name)
        return attr != "extra" and attr in {f.name for f in fields(self)}

    def get(self, name: str, default=None):
        if self.known(name):
            return getattr(self, self.attribute_for(name))
        return self.extra.get(name, default)

    def set(self, name: str, value: Any) -> None:
        if not self.known(name):
            self.extra[name] = value
            return

        attr = self.attribute_for(name)
        if attr == "bell_style" and value not in BELL_STYLES:
            raise ValueError(f"Unknown bell style '{value}', expected one of {', '.join(BELL_STYLES)}")
        if attr == "fill_column" and (not isinstance(value, int) or isinstance(value, bool) or value < 1):
            raise ValueError(f"fill-column must be a positive integer, got {value!r}")
        setattr(self, attr, value)

    def as_dict(self) -> Dict[str, Any]:
        data = {f.name.replace("_", "-"): getattr(self, f.name) for f in fields(self) if f.name != "extra"}
        data.update(self.extra)
        return data


def apply_settings(settings: Iterable[Setting], base: Optional[EditorSettings] = None) -> EditorSettings:
    config = base if base is not None else EditorSettings()
    for setting in settings:
        config.set(setting.name, setting.value)
    return config


def settings_from_pairs(pairs: Iterable) -> List[Setting]:
    return [pair if isinstance(pair, Setting) else Setting(*pair) for pair in pairs]


def load_custom_file(path: str) -> List[Setting]:
    """Read host-generated settings from ``path``; a missing file yields nothing."""
    if not path or not os.path.isfile(path):
        return []

    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)

    if not isinstance(data, dict):
        raise ValueError(f"Custom file {path} must hold a JSON object, got {type(data).__name__}")
    return [Setting(name, value) for name, value in data.items()]
