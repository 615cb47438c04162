"""Conversion of text in the Borin layout to UTF-8 Cyrillic."""

from __future__ import annotations

import string

from .common import Conversion, check_capacity

__all__ = ["convert", "to_cyrillic"]

# Cyrillic counterparts of A..Z; letters with no counterpart stay Latin.
_UPPER = (
    "\u0410\u0411\u0426\u0414\u0415\u0424\u0413\u0425\u0418\u0408"
    "\u041a\u041b\u041c\u041d\u041e\u041fQ\u0420\u0421\u0422\u0423"
    "\u0412WXY\u0417"
)

_LETTERS: dict[int, bytes] = {
    **{ord(a): c.encode() for a, c in zip(string.ascii_uppercase, _UPPER)},
    **{ord(a): c.encode() for a, c in zip(string.ascii_lowercase, _UPPER.lower())},
}

_UPPER_DIGRAPHS = {
    "Cx": "\u0427",
    "Cy": "\u040b",
    "Dx": "\u040f",
    "Dy": "\u0402",
    "Ly": "\u0409",
    "Ny": "\u040a",
    "Sx": "\u0428",
    "Zx": "\u0416",
}

_DIGRAPHS: dict[bytes, bytes] = {
    **{k.encode(): v.encode() for k, v in _UPPER_DIGRAPHS.items()},
    **{k.lower().encode(): v.lower().encode() for k, v in _UPPER_DIGRAPHS.items()},
}


def convert(data, capacity) -> Conversion:
    """Convert Borin-layout bytes to UTF-8 Cyrillic within ``capacity`` bytes.

    Only whole characters are written. A final lone source byte is copied
    unchanged, and bytes that are not ASCII letters pass through as they are.
    """
    data = bytes(data)
    room = check_capacity(capacity)
    out = bytearray()
    pos = 0
    size = len(data)
    while pos < size and room:
        if size - pos == 1:
            out.append(data[pos])
            return Conversion(bytes(out), 0, room - 1)
        mapped = _DIGRAPHS.get(data[pos:pos + 2])
        if mapped is not None:
            if room < 2:
                break
            out += mapped
            room -= 2
            pos += 2
            continue
        byte = data[pos]
        piece = _LETTERS.get(byte, bytes((byte,)))
        if len(piece) > room:
            break
        out += piece
        room -= len(piece)
        pos += 1
    return Conversion(bytes(out), size - pos, room)


def to_cyrillic(text: str) -> str:
    """Return ``text`` in the Borin layout rewritten in Cyrillic."""
    buffer = text.encode("utf-8") + b"\0"
    result = convert(buffer, 2 * len(buffer))
    return result.output[:-1].decode("utf-8")