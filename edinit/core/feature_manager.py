import time
import traceback
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from edinit.core.bootstrap import BootstrapPolicy
from edinit.core.conditions import conditions_met
from edinit.core.contracts.host_interface import BaseHost
from edinit.core.defaults import DEFAULTS
from edinit.core.feature_definitions import FeatureDeclaration, declarations_from_definitions


class RegistrationError(Exception):
    def __init__(self, feature: str, cause: BaseException):
        super().__init__(f"Feature '{feature}' failed to register: {cause}")
        self.feature = feature
        self.cause = cause


@dataclass
class RegistrationResult:
    name: str
    registered: bool
    steps: List[Tuple[str, str]] = field(default_factory=list)
    overrides: List[Tuple[str, str, str]] = field(default_factory=list)

    def record(self, phase: str, detail: str) -> None:
        self.steps.append((phase, detail))

    def phases(self) -> List[str]:
        return [phase for phase, _ in self.steps]


class FeatureManager:
    def __init__(self, host: BaseHost, defaults=DEFAULTS, feature_definitions=None, policy: Optional[BootstrapPolicy] = None, debug=False):
        self.host = host
        self.debug = debug
        self.policy = policy or BootstrapPolicy()
        self.results: Dict[str, RegistrationResult] = {}
        self.features: Dict[str, Dict[str, Any]] = {}
        self.load_features(defaults, feature_definitions or {})

    @property
    def verbose(self) -> bool:
        return self.debug or self.policy.verbose

    def log(self, message: str) -> None:
        if self.verbose:
            print(message)

    def shutdown(self):
        print("[FeatureManager] Shutting down features...")
        for name, feature in self.features.items():
            shutdown_fn = feature.get("shutdown")
            if callable(shutdown_fn):
                print(f"[FeatureManager] Shutting down {name}...")
                shutdown_fn()

    def load_features(self, defaults, feature_definitions):
        declarations = declarations_from_definitions(feature_definitions, defaults)
        scanned = 0
        disabled = 0
        skipped = 0

        if self.debug:
            print("[FeatureManager] FeatureManager is in debug mode!")

        print("[FeatureManager] Registering features...")
        print(f"[FeatureManager] {len(declarations)} feature(s) declared.")

        for declaration in declarations:
            scanned += 1
            print(f"  → [{declaration.name}] Registering {scanned}/{len(declarations)}...")

            if not declaration.enabled:
                print(f"    → ⚠️ Feature is disabled. Skipping...", flush=True)
                disabled += 1
                continue

            # failures halt every later declaration; earlier ones stay applied
            try:
                result = self.register(declaration)
            except Exception as e:
                print(f"    → ❌ Failed during registration of {declaration.name}")
                if self.debug:
                    traceback.print_exc()
                raise RegistrationError(declaration.name, e) from e

            if not result.registered:
                skipped += 1

        print(f"[FeatureManager] Scanned:\t{scanned} feature(s).")
        print(f"[FeatureManager] Disabled:\t{disabled} feature(s).")
        print(f"[FeatureManager] Skipped:\t{skipped} feature(s).")
        print(f"[FeatureManager] Loaded:\t{len(self.features)} feature(s).")
        return self.features

    def register(self, declaration: FeatureDeclaration) -> RegistrationResult:
        host = self.host
        result = RegistrationResult(declaration.name, registered=False)
        start_time = time.time()

        # 1. Evaluate conditions, nothing else may happen when they fail
        if not conditions_met(declaration.conditions, host):
            self.log(f"    → ⚠️ Conditions not met. Skipping...")
            self.results[declaration.name] = result
            return result
        result.record("conditions", "met")

        # 2. Ensure system-level dependencies
        for dependency in declaration.system_deps:
            ran_hint = dependency.apply(host)
            result.record("system-deps", dependency.describe())
            if ran_hint:
                self.log(f"    → ⚠️ {dependency.name} missing, ran: {dependency.hint}")

        # 3. Ensure the package itself is installed
        package = declaration.package_name
        if not declaration.builtin and not host.is_installed(package, declaration.version):
            ensure = self.policy.always_ensure if declaration.ensure is None else declaration.ensure
            if ensure:
                self.log(f"    → Installing {package}...")
                host.install_package(package)
                result.record("install", package)

        # 4. Init body runs before the package loads
        for effect in declaration.init:
            effect.apply(host)
            result.record("init", effect.describe())
            self.log(f"    → init: {effect.describe()}")

        # 5. Load the package and define its commands
        registration = {}
        if not declaration.builtin:
            registration = host.load_package(package, declaration.version)
            for command_name, command in registration.get("commands", {}).items():
                host.define_command(command_name, command)

            # 5.1. Perform self-test if exists
            self_test = registration.get("self_test")
            if callable(self_test) and not self_test():
                raise RuntimeError(f"Self-test failed for {package}")
            result.record("load", package)
        host.provide(declaration.name)

        # 6. Config body runs after the package loads
        for effect in declaration.config:
            effect.apply(host)
            result.record("config", effect.describe())
            self.log(f"    → config: {effect.describe()}")

        # 7. Register key-bindings, last registration wins
        for binding in declaration.bindings:
            previous = host.keymap.bind(binding.key, binding.command)
            if previous is not None and previous != binding.command:
                print(f"    → ⚠️ {binding.key} was bound to {previous}, now {binding.command}")
                result.overrides.append((str(binding.key), previous, binding.command))
            result.record("bind", f"{binding.key} {binding.command}")

        elapsed = time.time() - start_time
        self.log(f"    → ✅ Done ({elapsed:.2f}s)")

        result.registered = True
        self.results[declaration.name] = result
        self.features[declaration.name] = {
            "package": None if declaration.builtin else package,
            "version": declaration.version,
            "description": declaration.description,
            "commands": sorted(registration.get("commands", {})),
            "shutdown": registration.get("shutdown"),
        }
        return result

    def get_available_features(self):
        return {
            name: {
                "package": data["package"],
                "version": data["version"],
                "description": data["description"],
                "commands": data["commands"],
            }
            for name, data in self.features.items()
        }
