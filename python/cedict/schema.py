"""Entry schema for cedict.

Core concept:
    - Each dictionary line becomes one immutable Entry
    - Tone-marked and toneless pinyin are derived from the numbered pinyin
      whenever an Entry is constructed, never set independently

Example:
    一攬子 一揽子 [yi1 lan3 zi5] /all-inclusive/undiscriminating/
    → Entry(traditional="一攬子", simplified="一揽子", pinyin="yi1 lan3 zi5",
            pinyin_tone_marks="yīlǎnzi", pinyin_plain="yilanzi", ...)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .pinyin import render_tone_marks, render_toneless


class TokenType(Enum):
    """Classification of a dictionary line."""

    COMMENT = "comment"
    ENTRY = "entry"

    @classmethod
    def classify(cls, line: str, comment_char: str = "#") -> "TokenType":
        """Classify a line by its first character."""
        if line.startswith(comment_char):
            return cls.COMMENT
        return cls.ENTRY


@dataclass(frozen=True)
class Entry:
    """A single dictionary record."""

    traditional: str
    simplified: str
    pinyin: str                             # Numbered, space-separated
    definitions: tuple[str, ...]            # First gloss is the primary sense
    pinyin_tone_marks: str = field(init=False)
    pinyin_plain: str = field(init=False)

    def __post_init__(self):
        """Freeze definitions and derive the rendered pinyin forms."""
        object.__setattr__(self, "definitions", tuple(self.definitions))
        object.__setattr__(self, "pinyin_tone_marks", render_tone_marks(self.pinyin))
        object.__setattr__(self, "pinyin_plain", render_toneless(self.pinyin))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "traditional": self.traditional,
            "simplified": self.simplified,
            "pinyin": self.pinyin,
            "pinyin_tone_marks": self.pinyin_tone_marks,
            "pinyin_plain": self.pinyin_plain,
            "definitions": list(self.definitions),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Entry":
        """Create from dictionary. Derived pinyin fields are recomputed."""
        return cls(
            traditional=data["traditional"],
            simplified=data["simplified"],
            pinyin=data["pinyin"],
            definitions=tuple(data.get("definitions", [])),
        )

    def to_tsv(self) -> str:
        """Render as one tab-separated line (definitions joined by "; ")."""
        return "\t".join([
            self.traditional,
            self.simplified,
            self.pinyin,
            self.pinyin_tone_marks,
            "; ".join(self.definitions),
        ])
