"""Open URLs in a browser behind an interface tests can replace."""

import logging
import webbrowser
from abc import ABC, abstractmethod


logger = logging.getLogger("ray_this")


class UrlOpener(ABC):
    """Abstract interface for launching URLs in a browser."""

    @abstractmethod
    def open(self, url: str) -> bool:
        """Launch ``url`` and report whether a browser accepted it."""
        ...


class WebBrowserOpener(UrlOpener):
    """Open URLs with the platform's default browser."""

    def open(self, url: str) -> bool:
        try:
            return webbrowser.open(url)
        except webbrowser.Error as exc:
            logger.warning("Could not open browser: %s", exc)
            return False


class NullOpener(UrlOpener):
    """Never opens anything."""

    def open(self, url: str) -> bool:
        return False


__all__ = ["UrlOpener", "WebBrowserOpener", "NullOpener"]
