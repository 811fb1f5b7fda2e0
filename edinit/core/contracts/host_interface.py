from abc import ABC, abstractmethod

class BaseHost(ABC):
    # ***** PACKAGES *****
    @abstractmethod
    def is_installed(self, package: str, version: str = "v1_0") -> bool:
        pass

    @abstractmethod
    def install_package(self, package: str) -> None:
        pass

    @abstractmethod
    def load_package(self, package: str, version: str = "v1_0") -> dict:
        pass

    # ***** SYSTEM *****
    @abstractmethod
    def executable_found(self, name: str) -> bool:
        pass

    @abstractmethod
    def shell_command(self, command: str) -> str:
        pass

    @abstractmethod
    def browse_url(self, url: str) -> None:
        pass

    # ***** EDITOR STATE *****
    @abstractmethod
    def set_option(self, name: str, value) -> None:
        pass

    @abstractmethod
    def define_command(self, name: str, command: callable) -> None:
        pass

    @abstractmethod
    def call(self, name: str, *args):
        pass

    @abstractmethod
    def add_hook(self, hook: str, function: str) -> None:
        pass

    @abstractmethod
    def run_hooks(self, hook: str) -> None:
        pass

    @abstractmethod
    def provide(self, feature: str) -> None:
        pass

    @abstractmethod
    def featurep(self, feature: str) -> bool:
        pass

    # ***** INTERACTION *****
    @abstractmethod
    def invert_face(self, face: str) -> None:
        pass

    @abstractmethod
    def run_with_timer(self, delay: float, function: callable, *args) -> None:
        pass

    @abstractmethod
    def text_at_point(self) -> str:
        pass

    @abstractmethod
    def read_string(self, prompt: str, default: str = "") -> str:
        pass
