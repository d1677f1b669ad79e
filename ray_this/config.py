from __future__ import annotations

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger("ray_this")


@dataclass(slots=True)
class PublishSettings:
    """Display and tooling configuration for publishing snippets."""

    colors: str = "candy"
    padding: str = "32"
    background: str | None = None
    dark_mode: str | None = None
    prettier_command: str = "prettier"
    prettier_parser: str = "babel"
    format_timeout: int = 10
    filetypes_path: str | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "PublishSettings":
        def _int_env(name: str, default: int) -> int:
            raw = os.getenv(name)
            if not raw:
                return default
            try:
                return int(raw)
            except ValueError:
                logger.warning("Invalid integer for %s: %s", name, raw)
                return default

        return cls(
            colors=os.getenv("RAY_THIS_COLORS", "candy"),
            padding=os.getenv("RAY_THIS_PADDING", "32"),
            background=os.getenv("RAY_THIS_BACKGROUND") or None,
            dark_mode=os.getenv("RAY_THIS_DARK_MODE") or None,
            prettier_command=os.getenv("RAY_THIS_PRETTIER", "prettier"),
            prettier_parser=os.getenv("RAY_THIS_PRETTIER_PARSER", "babel"),
            format_timeout=_int_env("RAY_THIS_FORMAT_TIMEOUT", 10),
            filetypes_path=os.getenv("RAY_THIS_FILETYPES") or None,
            log_level=os.getenv("RAY_THIS_LOG_LEVEL", "WARNING"),
        )

    def display_options(self, title: str) -> dict[str, str]:
        """Options sent to ray.so alongside the code, in query order."""
        options = {
            "title": title,
            "colors": self.colors,
            "padding": self.padding,
        }
        if self.background is not None:
            options["background"] = self.background
        if self.dark_mode is not None:
            options["darkMode"] = self.dark_mode
        return options


__all__ = ["PublishSettings"]
