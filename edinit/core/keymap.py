from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple, Union

import jinja2
from edinit.core.contracts.keymap_interface import BaseKeymap

# canonical modifier order: alt, control, hyper, meta, shift, super
MODIFIER_ORDER = ("A", "C", "H", "M", "S", "s")
MODIFIERS = frozenset(MODIFIER_ORDER)


@dataclass(frozen=True)
class KeyChord:
    key: str
    modifiers: FrozenSet[str] = frozenset()

    @classmethod
    def parse(cls, text: str) -> "KeyChord":
        mods = set()
        rest = text
        # "C--" is control plus the minus key
        while len(rest) > 2 and rest[1] == "-" and rest[0] in MODIFIERS:
            mods.add(rest[0])
            rest = rest[2:]
        # a trailing "C-" is a modifier with no key
        if len(rest) == 2 and rest[1] == "-" and rest[0] in MODIFIERS:
            raise ValueError(f"Malformed key chord: '{text}'")
        if not rest:
            raise ValueError(f"Malformed key chord: '{text}'")
        if len(rest) > 1 and (rest.startswith("<") != rest.endswith(">") or rest == "<>"):
            raise ValueError(f"Malformed key chord: '{text}'")
        return cls(rest, frozenset(mods))

    def __str__(self) -> str:
        prefix = "".join(f"{m}-" for m in MODIFIER_ORDER if m in self.modifiers)
        return prefix + self.key


@dataclass(frozen=True)
class KeySequence:
    chords: Tuple[KeyChord, ...]

    @classmethod
    def parse(cls, text: str) -> "KeySequence":
        if not isinstance(text, str):
            raise ValueError(f"Key sequence must be a string, got {type(text)}")
        parts = text.split()
        if not parts:
            raise ValueError("Key sequence must not be empty")
        return cls(tuple(KeyChord.parse(part) for part in parts))

    def __str__(self) -> str:
        return " ".join(str(chord) for chord in self.chords)


KeyLike = Union[str, KeySequence]


def as_key_sequence(key: KeyLike) -> KeySequence:
    if isinstance(key, KeySequence):
        return key
    return KeySequence.parse(key)


class Keymap(BaseKeymap):
    def __init__(self, name: str = "global"):
        self.name = name
        self.bindings: Dict[KeySequence, str] = {}


    def bind(self, key: KeyLike, command: str) -> Optional[str]:
        """Bind ``key`` to ``command`` and return the command it replaced, if any."""
        sequence = as_key_sequence(key)
        previous = self.bindings.get(sequence)
        self.bindings[sequence] = command
        return previous


    def unbind(self, key: KeyLike) -> None:
        self.bindings.pop(as_key_sequence(key), None)


    def lookup(self, key: KeyLike) -> Optional[str]:
        return self.bindings.get(as_key_sequence(key))


    def as_dict(self) -> Dict[str, str]:
        return {str(key): command for key, command in sorted(self.bindings.items(), key=lambda kv: str(kv[0]))}


    def render(self) -> str:
        if not self.bindings:
            return "<p>No key bindings.</p>"

        template = jinja2.Template("""
            <h2>{{ name }} key bindings</h2>
            <table>
                <thead><tr><th>Key</th><th>Command</th></tr></thead>
                <tbody>
                {% for key, command in bindings.items() %}
                    <tr><td><kbd>{{ key }}</kbd></td><td><code>{{ command }}</code></td></tr>
                {% endfor %}
                </tbody>
            </table>
        """)

        return template.render(name=self.name, bindings=self.as_dict())
