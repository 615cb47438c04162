import pytest

from borin.common import Conversion
from borin.cyrillic import convert, to_cyrillic

SOURCE = "Ly_ly,Ny-ny;Sx:sx Dy dy Cx cx Cy cy Zx zx Dx dx"
EXPECTED = "Љ_љ,Њ-њ;Ш:ш Ђ ђ Ч ч Ћ ћ Ж ж Џ џ"

SENTENCE = (
    "Cxoban tera ovcxice. Lyulya Lyusxke, na Moravi krusxke. Kuq. "
    "Cxucxecyi sxcxepan dxak."
)
SENTENCE_EXPECTED = (
    "Чобан тера овчице. Љуља Љушке, на Морави крушке. Куq. "
    "Чучећи шчепан џак."
)


@pytest.mark.parametrize(
    "source, expected",
    [(SOURCE, EXPECTED), (SENTENCE, SENTENCE_EXPECTED)],
)
def test_convert_with_terminator(source, expected):
    buffer = source.encode() + b"\0"
    capacity = 2 * len(buffer)
    result = convert(buffer, capacity)
    wanted = expected.encode() + b"\0"
    assert result.output == wanted
    assert result.unread == 0
    assert result.unused == capacity - len(wanted)


@pytest.mark.parametrize(
    "source, expected",
    [(SOURCE, EXPECTED), (SENTENCE, SENTENCE_EXPECTED), ("", "")],
)
def test_to_cyrillic(source, expected):
    assert to_cyrillic(source) == expected


def test_stops_before_partial_letter():
    assert convert(b"abc", 3) == Conversion("а".encode(), 2, 1)


def test_last_byte_fills_remaining_room():
    assert convert(b"ab", 3) == Conversion("а".encode() + b"b", 0, 0)


def test_digraph_needs_two_bytes():
    assert convert(b"Sxa", 1) == Conversion(b"", 3, 1)


def test_zero_capacity():
    assert convert(b"abc", 0) == Conversion(b"", 3, 0)


def test_empty_source():
    assert convert(b"", 4) == Conversion(b"", 0, 4)


def test_negative_capacity():
    with pytest.raises(ValueError):
        convert(b"a", -1)


def test_letters_without_counterpart_and_symbols_kept():
    assert to_cyrillic("Qw XY 1!") == "Qw XY 1!"


def test_non_ascii_passes_through():
    assert to_cyrillic("α je ok") == "α је ок"