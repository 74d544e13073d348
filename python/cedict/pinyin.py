"""Numbered-tone pinyin rendering for cedict.

Converts CC-CEDICT pinyin such as "yi1 lan3 zi5" into:
    - tone-marked display form: "yīlǎnzi"
    - toneless search form: "yilanzi"

Rendering is total: tokens without a tone digit or without a markable vowel
(punctuation, "r5", "m2") are emitted unchanged.
"""

import unicodedata
from typing import Optional

VOWELS = "aeiouü"

# Rows are tones 0-5; 0 (unset) and 5 (neutral) carry no mark.
TONE_MARKS: tuple[str, ...] = (
    "aeiouü",
    "āēīōūǖ",
    "áéíóúǘ",
    "ǎěǐǒǔǚ",
    "àèìòùǜ",
    "aeiouü",
)

TONE_DIGITS = "12345"

# Marks of the four tones as combining characters (macron, acute, caron, grave).
_TONE_COMBINING = {"\u0304", "\u0301", "\u030c", "\u0300"}


def split_tone(syllable: str) -> tuple[str, int]:
    """Split a numbered syllable into its base and tone.

    Args:
        syllable: Syllable token, e.g. "lan3".

    Returns:
        (base, tone) where tone is 1-5, or 0 when the token has no
        trailing tone digit (the token is then returned unchanged).
    """
    if syllable and syllable[-1] in TONE_DIGITS:
        return syllable[:-1], int(syllable[-1])
    return syllable, 0


def mark_vowel(vowel: str, tone: int) -> str:
    """Return the precomposed character for a vowel carrying a tone."""
    if not 0 <= tone < len(TONE_MARKS):
        tone = 0
    lower = vowel.lower()
    if len(lower) != 1 or lower not in VOWELS:
        return vowel
    marked = TONE_MARKS[tone][VOWELS.index(lower)]
    return marked.upper() if vowel.isupper() else marked


def find_tone_vowel(base: str) -> Optional[int]:
    """Find the index of the vowel that carries the tone mark.

    Rules, first match wins: "a", then "e", then the "o" of "ou", then
    the right-most of "i", "ü", "o", "u".
    """
    # Lowered per character: str.lower() may change the length of the string.
    chars = [c.lower() for c in base]
    for vowel in ("a", "e"):
        if vowel in chars:
            return chars.index(vowel)
    for i in range(len(chars) - 1):
        if chars[i] == "o" and chars[i + 1] == "u":
            return i

    found = None
    for i, char in enumerate(chars):
        if char in ("i", "ü", "o", "u"):
            found = i
    return found


def mark_syllable(syllable: str) -> str:
    """Render one numbered syllable with its tone mark.

    "u:" is read as "ü" before the tone is applied.
    """
    base, tone = split_tone(syllable.replace("u:", "ü").replace("U:", "Ü"))
    if tone in (0, 5):
        return base

    idx = find_tone_vowel(base)
    if idx is None:
        return base
    return base[:idx] + mark_vowel(base[idx], tone) + base[idx + 1:]


def plain_syllable(syllable: str) -> str:
    """Render one numbered syllable without tone, "ü" written as "v"."""
    base, _ = split_tone(syllable.replace("u:", "v").replace("U:", "V"))
    return base.replace("ü", "v").replace("Ü", "V")


def syllables(pinyin: str) -> list[str]:
    """Split a pinyin field into its space-separated tokens."""
    return pinyin.split(" ")


def render_tone_marks(pinyin: str) -> str:
    """Render a numbered pinyin string with tone marks.

    Args:
        pinyin: Space-separated numbered syllables, e.g. "yi1 lan3 zi5".

    Returns:
        Marked syllables joined without separators, e.g. "yīlǎnzi".
    """
    return "".join(mark_syllable(s) for s in syllables(pinyin))


def render_toneless(pinyin: str) -> str:
    """Render a numbered pinyin string without tones, for fuzzy search.

    Args:
        pinyin: Space-separated numbered syllables, e.g. "lu:4 se4".

    Returns:
        Plain syllables joined without separators, e.g. "lvse".
    """
    return "".join(plain_syllable(s) for s in syllables(pinyin))


def strip_tone_marks(text: str) -> str:
    """Remove tone diacritics from already-marked pinyin.

    Decomposes to NFD, drops the four tone marks but keeps the diaeresis,
    then writes "ü" as "v" so the result matches render_toneless().

    Args:
        text: Marked pinyin, e.g. "lǜsè".

    Returns:
        Toneless form, e.g. "lvse".
    """
    decomposed = unicodedata.normalize("NFD", text)
    kept = "".join(c for c in decomposed if c not in _TONE_COMBINING)
    composed = unicodedata.normalize("NFC", kept)
    return composed.replace("ü", "v").replace("Ü", "V")
