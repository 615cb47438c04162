# borin

Bora's layout writes Serbian text using only ASCII letters. Each letter
with a diacritic, and each Cyrillic letter that has no single-letter Latin
equivalent, is written as a base letter followed by `x` or `y`:

| Bora | Cyrillic | Latin |
|------|----------|-------|
| `Cx` `cx` | Ч ч | Č č |
| `Cy` `cy` | Ћ ћ | Ć ć |
| `Dx` `dx` | Џ џ | ǅ ǆ |
| `Dy` `dy` | Ђ ђ | Đ đ |
| `Ly` `ly` | Љ љ | Lj lj |
| `Ny` `ny` | Њ њ | Nj nj |
| `Sx` `sx` | Ш ш | Š š |
| `Zx` `zx` | Ж ж | Ž ž |

This package converts Bora text to UTF-8 Cyrillic or Latin script. It
also converts UTF-8 Cyrillic or Latin text back to Bora's layout.

## Installation

```
pip install borin
```

## Usage

```python
from borin.cyrillic import to_cyrillic
from borin.latin import to_latin
from borin.to_borin import from_utf8

to_cyrillic("Cxoban tera ovcxice.")  # 'Чобан тера овчице.'
to_latin("Lyulya Lyusxke")            # 'Ljulja Ljuške'
from_utf8("Чучећи шчепан џак.")      # 'Cxucxecyi sxcxepan dxak.'
```

Conversion rules:

- Any character that is not an ASCII letter is copied unchanged.
- In Cyrillic output, `Q`, `W`, `X` and `Y` have no counterpart, so they stay as they are.
- In Latin output, `Dx`/`dx` become the single letters `ǅ`/`ǆ`. `Ly` and `Ny` become the two letters `Lj` and `Nj`.
- The last byte of the input is copied as it is, even if it is the first half of a digraph.
- `from_utf8` recognises the Serbian Cyrillic letters and the Latin letters `Č Ć Đ Š Ž`, in upper and lower case.
- `from_utf8` also recognises the single-character digraphs `Ǆ ǅ ǆ Ǉ ǈ ǉ Ǌ ǋ ǌ`. The fully capitalised forms become the title-case Bora spelling, for example `Ǆ` becomes `Dx`.
- The two-letter Latin spellings such as `Lj` or `Dž` are not changed into `Ly` or `Dzx`.

## Converting into a buffer of limited size

Each of `borin.cyrillic`, `borin.latin` and `borin.to_borin` also provides
`convert(data, capacity)`.

- It takes bytes (or any bytes-like object) and writes at most `capacity` bytes of output.
- A character is only written if it fits whole.
- A negative capacity raises `ValueError`.

The result is a frozen `borin.common.Conversion` with three fields:

- `output`: the converted bytes.
- `unread`: how many source bytes were left unconverted.
- `unused`: how much of the capacity went unused.

```python
from borin.cyrillic import convert

result = convert(b"sxuma", 4)
# result.output == "шу".encode(), result.unread == 2, result.unused == 0
```

In `borin.to_borin.convert`, bytes with the high bit set are taken in pairs.

- A pair that encodes a known letter is replaced by its Bora spelling.
- Any other pair is copied unchanged.
- An unfinished pair at the end of the input is left unread.

## Running the tests

```
pip install -e .[test]
pytest
```