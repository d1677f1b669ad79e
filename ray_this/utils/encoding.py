import base64


def encode_code(text: str) -> str:
    """Return the standard base64 encoding of ``text``'s UTF-8 bytes."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_code(payload: str) -> str:
    """Inverse of :func:`encode_code`."""
    return base64.b64decode(payload.encode("ascii"), validate=True).decode("utf-8")
