"""Text normalization and fingerprint utilities for consistent keying."""

import re


def normalize_text(text: str) -> str:
    """
    Normalize text for consistent cache keying.

    Rules:
    - Trim leading and trailing whitespace
    - Collapse runs of whitespace (spaces, tabs, newlines) to single spaces
    - Case-sensitive

    Args:
        text: Original text to normalize.

    Returns:
        Normalized text string.
    """
    text = text.strip()
    text = re.sub(r'\s+', ' ', text)
    return text


def fast_hash(text: str) -> str:
    """
    Fast non-cryptographic 32-bit fingerprint of ``text`` in base 36.

    Computes ``h = h * 31 + unit`` over the UTF-16 code units with 32-bit
    signed wrap-around and returns the absolute value in base 36, so the
    values match fingerprints produced by browser clients. Empty text
    hashes to ``"0"``.
    """
    h = 0
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = (h * 31 + unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return _to_base36(abs(h))


def _to_base36(value: int) -> str:
    digits = "0123456789abcdefghijklmnopqrstuvwxyz"
    if value == 0:
        return "0"
    out = []
    while value:
        value, rem = divmod(value, 36)
        out.append(digits[rem])
    return "".join(reversed(out))
