"""
Utility functions shared across the structures, including the tree fingerprint.
"""
import json
from typing import Any

_UINT32_MASK = 0xFFFFFFFF


def to_int32(x: int) -> int:
    """Wrap an arbitrary int to a signed 32-bit integer."""
    x &= _UINT32_MASK
    return x - (1 << 32) if x & 0x80000000 else x


def compact_json(data: Any) -> str:
    """Serialize plain data without whitespace, the way ``JSON.stringify`` does."""
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def rolling_hash(text: str) -> int:
    """
    DJB2-style rolling hash over the characters of ``text``.

    Each step computes ``((h << 5) - h + ord(c))`` and wraps the result to a
    signed 32-bit integer, starting from 0.
    """
    h = 0
    for ch in text:
        h = to_int32((h << 5) - h + ord(ch))
    return h


def js_hex(n: int) -> str:
    """Render an int in base 16 with a leading minus sign for negatives."""
    return f"-{-n:x}" if n < 0 else f"{n:x}"


def fingerprint(data: Any) -> str:
    """
    Content fingerprint of a tree (or any plain data).

    Tree nodes are converted via their ``to_dict()`` method; ``None`` hashes
    as the JSON literal ``null``. Not suitable for anything security related.
    """
    if hasattr(data, "to_dict"):
        data = data.to_dict()
    return js_hex(rolling_hash(compact_json(data)))
