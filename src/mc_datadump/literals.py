"""Rust literal rendering shared by the table emitters."""

from __future__ import annotations

import math
import struct
from decimal import ROUND_HALF_UP, Context, Decimal

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}
_TENTHS = Decimal("0.1")
# Wide enough for every digit of the largest float32 plus one decimal.
_WIDE = Context(prec=60)


def rust_str(value: str) -> str:
    """Quote ``value`` as a Rust string literal."""
    chars = []
    for char in value:
        if char in _ESCAPES:
            chars.append(_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            chars.append(f"\\u{{{ord(char):x}}}")
        else:
            chars.append(char)
    return '"' + "".join(chars) + '"'


def format_tenths(value: float) -> str:
    """Render ``value`` with exactly one decimal digit, rounding half up like ``%.1f``."""
    if not math.isfinite(value):
        raise ValueError(f"cannot render non-finite value {value!r}")
    # repr() gives the shortest round-tripping digits, so 0.25 rounds to 0.3.
    return str(Decimal(repr(float(value))).quantize(_TENTHS, rounding=ROUND_HALF_UP, context=_WIDE))


def to_float32(value: float) -> float:
    """Round-trip ``value`` through IEEE single precision, as the host stores it."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def format_block_id(block_id: int) -> str:
    return f"{block_id:04x}"
