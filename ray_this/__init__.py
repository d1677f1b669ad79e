"""Publish code selections as ray.so screenshot URLs."""

from .config import PublishSettings
from .language import LanguageTable, load_language_table, resolve_language
from .orchestration import SnippetPublisher, create_snippet
from .snippet import Snippet
from .utils import build_ray_url, decode_code, encode_code, generate_ray_url

__all__ = [
    "PublishSettings",
    "LanguageTable",
    "load_language_table",
    "resolve_language",
    "SnippetPublisher",
    "create_snippet",
    "Snippet",
    "build_ray_url",
    "decode_code",
    "encode_code",
    "generate_ray_url",
]
