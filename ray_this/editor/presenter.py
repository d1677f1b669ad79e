import sys
from abc import ABC, abstractmethod

from tqdm import tqdm


class Presenter(ABC):
    """User-facing notifications."""

    @abstractmethod
    def show_info(self, message: str) -> None:
        ...

    @abstractmethod
    def show_error(self, message: str) -> None:
        ...


class ConsolePresenter(Presenter):
    def show_info(self, message: str) -> None:
        tqdm.write(message)

    def show_error(self, message: str) -> None:
        tqdm.write(f"❌ {message}", file=sys.stderr)


__all__ = ["Presenter", "ConsolePresenter"]
