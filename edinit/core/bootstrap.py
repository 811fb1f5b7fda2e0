from dataclasses import dataclass

from edinit.core.contracts.host_interface import BaseHost


@dataclass(frozen=True)
class BootstrapPolicy:
    verbose: bool = False
    always_ensure: bool = False


class PackageBootstrap:
    """Makes sure the declarative helper extension is available before any declaration runs.

    There is no retry: a failed download propagates and aborts startup.
    """

    def __init__(self, host: BaseHost, helper: str, verbose: bool = True, always_ensure: bool = True):
        self.host = host
        self.helper = helper
        self.verbose = verbose
        self.always_ensure = always_ensure

    def run(self) -> BootstrapPolicy:
        print(f"[Bootstrap] Checking for {self.helper}...")

        if not self.host.is_installed(self.helper):
            print(f"    → ⚠️ {self.helper} is missing. Installing...")
            self.host.install_package(self.helper)

        registration = self.host.load_package(self.helper)
        for name, command in registration.get("commands", {}).items():
            self.host.define_command(name, command)
        self.host.provide(self.helper)

        policy = BootstrapPolicy(verbose=self.verbose, always_ensure=self.always_ensure)
        print(f"    → ✅ {self.helper} ready (verbose={policy.verbose}, always-ensure={policy.always_ensure})")
        return policy
