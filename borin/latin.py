"""Conversion of text in the Borin layout to UTF-8 Latin script."""

from __future__ import annotations

from .common import Conversion, check_capacity

__all__ = ["convert", "to_latin"]

# Dx/dx become the single letters U+01C5/U+01C6 so that every
# replacement stays two bytes long.
_DIGRAPHS: dict[bytes, bytes] = {
    key.encode(): value.encode()
    for key, value in {
        "Cx": "\u010c",
        "Cy": "\u0106",
        "Dx": "\u01c5",
        "Dy": "\u0110",
        "Ly": "Lj",
        "Ny": "Nj",
        "Sx": "\u0160",
        "Zx": "\u017d",
        "cx": "\u010d",
        "cy": "\u0107",
        "dx": "\u01c6",
        "dy": "\u0111",
        "ly": "lj",
        "ny": "nj",
        "sx": "\u0161",
        "zx": "\u017e",
    }.items()
}


def convert(data, capacity) -> Conversion:
    """Convert Borin-layout bytes to UTF-8 Latin within ``capacity`` bytes.

    Only whole characters are written; every byte that does not start a
    Borin digraph is copied unchanged.
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
        else:
            out.append(data[pos])
            room -= 1
            pos += 1
    return Conversion(bytes(out), size - pos, room)


def to_latin(text: str) -> str:
    """Return ``text`` in the Borin layout rewritten in Latin script."""
    buffer = text.encode("utf-8") + b"\0"
    result = convert(buffer, 2 * len(buffer))
    return result.output[:-1].decode("utf-8")