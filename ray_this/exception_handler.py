import logging


NO_ACTIVE_EDITOR_MESSAGE = (
    "You need to have an open editor to upload a code snippet to Ray.so. "
    "Please select a file and make a text selection to upload a snippet."
)

EMPTY_SELECTION_MESSAGE = (
    "You have to have text selected to upload a snippet to Ray.so. "
    "Please select the text you would like to be included in your snippet."
)


class RayThisError(Exception):
    """Base class for errors raised by ray_this."""


class PreconditionError(RayThisError):
    """A publish request is missing something only the user can supply."""

    default_message = "Cannot publish snippet"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class NoActiveEditorError(PreconditionError):
    default_message = NO_ACTIVE_EDITOR_MESSAGE


class EmptySelectionError(PreconditionError):
    default_message = EMPTY_SELECTION_MESSAGE


class FormattingError(RayThisError):
    """Raised by a formatter that could not reformat its input."""


class LanguageTableError(RayThisError):
    """Raised when the file type table cannot be loaded or is malformed."""


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the project logger once and return it."""
    logger = logging.getLogger("ray_this")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


__all__ = [
    "RayThisError",
    "PreconditionError",
    "NoActiveEditorError",
    "EmptySelectionError",
    "FormattingError",
    "LanguageTableError",
    "NO_ACTIVE_EDITOR_MESSAGE",
    "EMPTY_SELECTION_MESSAGE",
    "setup_logging",
]
