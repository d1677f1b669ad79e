"""Shared encoding and URL helpers."""

from .encoding import decode_code, encode_code
from .url import RAY_BASE_URL, build_ray_url, generate_ray_url, percent_encode

__all__ = [
    "decode_code",
    "encode_code",
    "RAY_BASE_URL",
    "build_ray_url",
    "generate_ray_url",
    "percent_encode",
]
