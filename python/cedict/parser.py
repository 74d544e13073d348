"""CC-CEDICT line parser.

Entry line format:
    TRADITIONAL SIMPLIFIED [PINYIN] /DEF1/DEF2/.../

Header comments may carry metadata:
    #! version=1
    #! date=2024-01-01T00:00:00Z
"""

import re
from typing import Optional

from .errors import BadFormatError
from .schema import Entry

ENTRY_PATTERN = re.compile(
    r"^(?P<trad>\S+)\s+(?P<simp>\S+)\s+"
    r"\[(?P<pinyin>[^\]]+)\]\s*"
    r"/(?P<defs>.*)/\s*$"
)

METADATA_PATTERN = re.compile(r"^#!\s*(?P<key>[^=\s]+)\s*=\s*(?P<value>.*?)\s*$")


def split_definitions(field: str) -> tuple[str, ...]:
    """Split a slash-delimited definitions field, dropping empty glosses."""
    return tuple(d for d in field.split("/") if d)


def parse_entry(line: str, line_number: Optional[int] = None) -> Entry:
    """Parse one entry line.

    Args:
        line: Raw line without its terminator, e.g.
            "一壁 一壁 [yi1 bi4] /one side/at the same time/".
        line_number: Position in the source, used in error messages.

    Returns:
        New Entry with lowercased pinyin.

    Raises:
        BadFormatError: If the line does not match the entry grammar or has
            no definitions.
    """
    match = ENTRY_PATTERN.match(line)
    if match is None:
        raise BadFormatError(line, line_number)

    definitions = split_definitions(match.group("defs"))
    if not definitions:
        raise BadFormatError(line, line_number, reason="no definitions")

    return Entry(
        traditional=match.group("trad"),
        simplified=match.group("simp"),
        pinyin=match.group("pinyin").lower(),
        definitions=definitions,
    )


def parse_metadata(comment: str) -> Optional[tuple[str, str]]:
    """Parse a "#! key=value" header comment.

    Returns:
        (key, value) or None if the comment carries no metadata.
    """
    match = METADATA_PATTERN.match(comment)
    if match is None:
        return None
    return match.group("key"), match.group("value")
