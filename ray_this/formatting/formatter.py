"""Best-effort source formatting before a snippet is published."""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from typing import Mapping, Sequence

from ..exception_handler import FormattingError


logger = logging.getLogger("ray_this")

# Style applied to every snippet, expressed as prettier CLI flags.
PRETTIER_STYLE: Mapping[str, str | bool] = {
    "arrow-parens": "always",
    "bracket-spacing": True,
    "html-whitespace-sensitivity": "css",
    "insert-pragma": False,
    "print-width": "100",
    "prose-wrap": "preserve",
    "quote-props": "as-needed",
    "require-pragma": False,
    "semi": True,
    "single-quote": True,
    "tab-width": "2",
    "trailing-comma": "es5",
    "use-tabs": False,
    "end-of-line": "lf",
}

# Flags prettier enables by default; only their --no-* form exists.
_DEFAULT_ON_FLAGS = {"bracket-spacing", "semi"}


class CodeFormatter(ABC):
    """Reformats source text. Implementations may raise on any failure."""

    @abstractmethod
    def format(self, text: str) -> str:
        ...


class PrettierFormatter(CodeFormatter):
    """Run the ``prettier`` CLI over stdin with the fixed snippet style."""

    def __init__(
        self,
        command: str | Sequence[str] = "prettier",
        *,
        parser: str = "babel",
        timeout: float | None = 10,
        style: Mapping[str, str | bool] | None = None,
    ) -> None:
        self.command = [command] if isinstance(command, str) else list(command)
        self.parser = parser
        self.timeout = timeout
        self.style = dict(PRETTIER_STYLE if style is None else style)

    def build_args(self) -> list[str]:
        args = list(self.command)
        for name, value in self.style.items():
            if value is True:
                if name not in _DEFAULT_ON_FLAGS:
                    args.append(f"--{name}")
            elif value is False:
                if name in _DEFAULT_ON_FLAGS:
                    args.append(f"--no-{name}")
            else:
                args.extend([f"--{name}", str(value)])
        args.extend(["--parser", self.parser])
        return args

    def format(self, text: str) -> str:
        cmd = self.build_args()
        logger.debug("Formatting %d characters with %s", len(text), cmd[0])

        try:
            result = subprocess.run(
                cmd,
                input=text.encode("utf-8"),
                check=False,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise FormattingError(f"Formatter not found: {cmd[0]}") from exc
        except subprocess.TimeoutExpired as exc:
            raise FormattingError(f"Formatter timed out after {self.timeout}s") from exc

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="ignore")
            raise FormattingError(
                f"Formatter exited with status {result.returncode}: {stderr.strip()}"
            )

        return result.stdout.decode("utf-8")


def format_snippet(text: str, formatter: CodeFormatter | None = None) -> str:
    """Format ``text``, falling back to the trimmed original on any failure."""
    if formatter is None:
        return text.strip()

    try:
        return formatter.format(text)
    except Exception:
        logger.debug("Formatting failed, publishing unformatted snippet", exc_info=True)
        return text.strip()


__all__ = [
    "PRETTIER_STYLE",
    "CodeFormatter",
    "PrettierFormatter",
    "format_snippet",
]
