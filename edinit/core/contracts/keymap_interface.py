from abc import ABC, abstractmethod

class BaseKeymap(ABC):
    @abstractmethod
    def __init__(self, name: str):
        pass

    @abstractmethod
    def bind(self, key, command: str):
        pass

    @abstractmethod
    def unbind(self, key) -> None:
        pass

    @abstractmethod
    def lookup(self, key):
        pass

    @abstractmethod
    def render(self) -> str:
        pass
