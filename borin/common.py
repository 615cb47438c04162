"""Result type shared by the Borin layout converters."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Conversion:
    """Outcome of converting a byte string into a bounded output area.

    ``output`` holds the converted bytes, ``unread`` is how many source
    bytes were left unprocessed and ``unused`` is how much of the output
    capacity was left unfilled.
    """

    output: bytes
    unread: int
    unused: int


def check_capacity(capacity: int) -> int:
    """Validate an output capacity and return it as an int."""
    capacity = int(capacity)
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    return capacity