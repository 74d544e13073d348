"""cedict - CC-CEDICT dictionary reader.

Reads the line-oriented CC-CEDICT format into structured entries and renders
numbered-tone pinyin as tone marks or as a toneless search form.

Entry line format:
    TRADITIONAL SIMPLIFIED [PINYIN] /DEF1/DEF2/.../

Example:
    一攬子 一揽子 [yi1 lan3 zi5] /all-inclusive/undiscriminating/
    → traditional "一攬子", simplified "一揽子", pinyin "yi1 lan3 zi5",
      tone marks "yīlǎnzi", plain "yilanzi",
      definitions ("all-inclusive", "undiscriminating")

Usage:
    from cedict import CEDict, NoMoreEntries

    with open("cedict_ts.u8", "rb") as f:
        for entry in CEDict(f):
            print(entry.simplified, entry.pinyin_tone_marks, entry.definitions[0])

    from cedict import render_tone_marks
    render_tone_marks("yan3 bu4 jian4 , xin1 bu4 fan2")  # "yǎnbùjiàn,xīnbùfán"
"""

from .errors import BadFormatError, CEDictError, NoMoreEntries, ReadError
from .parser import parse_entry
from .pinyin import render_tone_marks, render_toneless, strip_tone_marks
from .schema import Entry, TokenType
from .tokenizer import CEDict, LineTokenizer

__version__ = "0.1.0"

__all__ = [
    "CEDict",
    "LineTokenizer",
    "Entry",
    "TokenType",
    "parse_entry",
    "render_tone_marks",
    "render_toneless",
    "strip_tone_marks",
    "CEDictError",
    "BadFormatError",
    "NoMoreEntries",
    "ReadError",
]
