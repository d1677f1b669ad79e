"""Build ray.so snippet URLs."""

from __future__ import annotations

from urllib.parse import quote

from ..language import LanguageTable, resolve_language
from ..snippet import SnippetOptions
from .encoding import encode_code


RAY_BASE_URL = "https://ray.so/?"

# quote() always keeps letters, digits and "_.-~"; these complete the
# unreserved set of a URI component.
_COMPONENT_SAFE = "!*'()"


def percent_encode(value: str) -> str:
    """Escape ``value`` for use as a URL query component."""
    return quote(str(value), safe=_COMPONENT_SAFE, encoding="utf-8")


def build_ray_url(
    encoded_code: str,
    language: str,
    options: SnippetOptions | None = None,
) -> str:
    """Assemble the ray.so URL for an already encoded snippet.

    Caller options keep their insertion order; ``code`` and ``language``
    always carry the values passed here, even when ``options`` defines them.
    """
    params = dict(options or {})
    params["code"] = encoded_code
    params["language"] = language

    query = "&".join(f"{key}={percent_encode(value)}" for key, value in params.items())
    return RAY_BASE_URL + query


def generate_ray_url(
    code: str,
    file_name: str | None = None,
    options: SnippetOptions | None = None,
    table: LanguageTable | None = None,
) -> str:
    """Encode ``code``, resolve its language from ``file_name`` and build the URL."""
    return build_ray_url(
        encode_code(code),
        resolve_language(file_name, table),
        options,
    )


__all__ = ["RAY_BASE_URL", "percent_encode", "build_ray_url", "generate_ray_url"]
