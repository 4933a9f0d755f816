"""Small string helpers."""

from collections.abc import Iterable


def ends_with(text: str | None, suffix: str | None) -> bool:
    """Return True if ``text`` ends with ``suffix``; empty or missing inputs never match."""
    if text is None or suffix is None:
        return False
    if not text or not suffix or len(suffix) > len(text):
        return False
    return text.endswith(suffix)


def byte_array_to_str(data: bytes | bytearray | Iterable[int]) -> str:
    """Return the lowercase hex representation of ``data``, two characters per byte."""
    return bytes(data).hex()