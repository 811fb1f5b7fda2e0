import importlib.util
import os
from typing import Dict, Optional

import requests


class PackageNotFoundError(Exception):
    def __init__(self, package: str, archives):
        super().__init__(f"Package '{package}' is not available from any archive ({', '.join(archives) or 'none configured'})")
        self.package = package


class PackageLoadError(Exception):
    pass


def module_name(package: str) -> str:
    return package.replace("-", "_")


class PackageStore:
    """Finds, installs and imports editor extensions.

    An extension is a single Python file exposing ``register()``. Bundled
    extensions live at ``<builtin_dir>/<module>/<version>/<module>.py``;
    downloaded ones at ``<install_dir>/<module>.py``.
    """

    def __init__(self, builtin_dir: str, install_dir: str, archives: Dict[str, str], timeout: int = 30, session=None):
        self.builtin_dir = builtin_dir
        self.install_dir = install_dir
        self.archives = dict(archives)
        self.timeout = timeout
        self.session = session or requests.Session()

    def locate(self, package: str, version: str = "v1_0") -> Optional[str]:
        name = module_name(package)
        candidates = [
            os.path.join(self.builtin_dir, name, version, f"{name}.py"),
            os.path.join(self.install_dir, f"{name}.py"),
        ]
        for candidate in candidates:
            if os.path.isfile(candidate):
                return candidate
        return None

    def is_installed(self, package: str, version: str = "v1_0") -> bool:
        return self.locate(package, version) is not None

    def install(self, package: str) -> str:
        name = module_name(package)

        for archive, base_url in self.archives.items():
            url = f"{base_url.rstrip('/')}/{name}.py"
            print(f"[PackageStore] Fetching {package} from {archive} ({url})...")

            # network failures propagate; a missing file just means "try the next archive"
            response = self.session.get(url, timeout=self.timeout)
            if response.status_code == 404:
                print(f"    → ⚠️ Not in {archive}.")
                continue
            response.raise_for_status()

            os.makedirs(self.install_dir, exist_ok=True)
            target = os.path.join(self.install_dir, f"{name}.py")
            with open(target, "wb") as fh:
                fh.write(response.content)

            print(f"    → ✅ Installed {package} to {target}")
            return target

        raise PackageNotFoundError(package, list(self.archives))

    def load(self, package: str, version: str = "v1_0") -> dict:
        path = self.locate(package, version)
        if path is None:
            raise PackageLoadError(f"Cannot load '{package}': not installed")

        # Load the module dynamically
        spec = importlib.util.spec_from_file_location(f"edinit_ext_{module_name(package)}", path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)

        # call register()
        if not hasattr(module, "register"):
            raise PackageLoadError(f"Extension file does not have a register() function: {path}")

        registration = module.register()
        if not isinstance(registration, dict):
            raise PackageLoadError(f"Bad registration from {path}: required dict, got {type(registration)} instead.")

        return registration
