"""Conversion of UTF-8 Serbian text, Cyrillic or Latin, to the Borin layout."""

from __future__ import annotations

from .common import Conversion, check_capacity

__all__ = ["convert", "from_utf8"]

_CYRILLIC_LETTERS = dict(
    zip(
        "ABCDEFGHIJKLMNOPRSTUVZ",
        "\u0410\u0411\u0426\u0414\u0415\u0424\u0413\u0425\u0418\u0408\u041a"
        "\u041b\u041c\u041d\u041e\u041f\u0420\u0421\u0422\u0423\u0412\u0417",
    )
)

_CYRILLIC_DIGRAPHS = {
    "Cx": "\u0427",
    "Cy": "\u040b",
    "Dx": "\u040f",
    "Dy": "\u0402",
    "Ly": "\u0409",
    "Ny": "\u040a",
    "Sx": "\u0428",
    "Zx": "\u0416",
}

_LATIN_LETTERS = {
    "Cy": "\u0106",
    "Cx": "\u010c",
    "Dy": "\u0110",
    "Sx": "\u0160",
    "Zx": "\u017d",
}

# Single-character digraph letters; their fully capitalised forms also
# map to the title-case Borin spelling.
_LATIN_LIGATURES = {
    "\u01c4": "Dx",
    "\u01c5": "Dx",
    "\u01c6": "dx",
    "\u01c7": "Ly",
    "\u01c8": "Ly",
    "\u01c9": "ly",
    "\u01ca": "Ny",
    "\u01cb": "Ny",
    "\u01cc": "ny",
}


def _build_table() -> dict[bytes, bytes]:
    table: dict[str, str] = {}
    for group in (_CYRILLIC_LETTERS, _CYRILLIC_DIGRAPHS, _LATIN_LETTERS):
        for borin, char in group.items():
            table[char] = borin
            table[char.lower()] = borin.lower()
    table.update(_LATIN_LIGATURES)
    return {char.encode(): borin.encode() for char, borin in table.items()}


_TABLE = _build_table()


def convert(data, capacity) -> Conversion:
    """Convert UTF-8 bytes to the Borin layout within ``capacity`` bytes.

    Non-ASCII bytes are handled in pairs; a known two-byte letter is
    replaced by its Borin spelling and any other pair is copied as is.
    An unfinished pair at the end of the source is left unread.
    """
    data = bytes(data)
    room = check_capacity(capacity)
    out = bytearray()
    pos = 0
    size = len(data)
    while pos < size and room:
        byte = data[pos]
        if byte & 0x80:
            if size - pos == 1 or room < 2:
                break
            pair = data[pos:pos + 2]
            piece = _TABLE.get(pair, pair)
            out += piece
            room -= len(piece)
            pos += 2
        else:
            out.append(byte)
            room -= 1
            pos += 1
    return Conversion(bytes(out), size - pos, room)


def from_utf8(text: str) -> str:
    """Return ``text`` rewritten in the Borin layout."""
    buffer = text.encode("utf-8") + b"\0"
    result = convert(buffer, len(buffer))
    return result.output[:-1].decode("utf-8")