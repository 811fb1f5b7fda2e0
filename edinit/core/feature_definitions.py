from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from edinit.core.defaults import DEFAULTS
from edinit.core.effects import Effect, InstallDependency, parse_effect
from edinit.core.keymap import KeySequence, as_key_sequence


# HELPER METHODS
def apply_defaults(config, defaults):
    for key, value in defaults.items():
        config.setdefault(key, value)
    return config

def apply_overrides(config, overrides):
    for key, value in overrides.items():
        if key not in config:
            raise ValueError(f"Unknown feature setting '{key}'")
        config[key] = value
    return config
# ==================================


@dataclass(frozen=True)
class KeyBinding:
    key: KeySequence
    command: str


@dataclass(frozen=True)
class FeatureDeclaration:
    name: str
    package: Optional[str] = None
    version: str = "v1_0"
    enabled: bool = True
    builtin: bool = False
    ensure: Optional[bool] = None
    description: str = ""
    conditions: Tuple[Any, ...] = ()
    system_deps: Tuple[InstallDependency, ...] = ()
    init: Tuple[Effect, ...] = ()
    config: Tuple[Effect, ...] = ()
    bindings: Tuple[KeyBinding, ...] = ()

    @property
    def package_name(self) -> str:
        return self.package or self.name


def declaration_from_dict(name: str, overrides: Dict[str, Any], defaults: Dict[str, Any] = DEFAULTS) -> FeatureDeclaration:
    config = apply_defaults({}, defaults)
    config = apply_overrides(config, overrides or {})

    return FeatureDeclaration(
        name=name,
        package=config["package"],
        version=config["version"],
        enabled=bool(config["enabled"]),
        builtin=bool(config["builtin"]),
        ensure=config["ensure"],
        description=config["description"] or "",
        conditions=tuple(config["conditions"]),
        system_deps=tuple(InstallDependency(dep, hint) for dep, hint in config["system_deps"]),
        init=tuple(parse_effect(effect) for effect in config["init"]),
        config=tuple(parse_effect(effect) for effect in config["config"]),
        bindings=tuple(KeyBinding(as_key_sequence(key), command) for key, command in config["bindings"]),
    )


def declarations_from_definitions(feature_definitions: Dict[str, Dict[str, Any]], defaults: Dict[str, Any] = DEFAULTS) -> List[FeatureDeclaration]:
    # dict keys keep feature names unique; insertion order is registration order
    return [declaration_from_dict(name, overrides, defaults) for name, overrides in feature_definitions.items()]
