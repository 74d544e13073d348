"""Exceptions raised while reading CC-CEDICT dictionaries."""

from typing import Optional


class CEDictError(Exception):
    """Base class for cedict errors."""


class BadFormatError(CEDictError, ValueError):
    """An entry line does not match `TRAD SIMP [PINYIN] /DEF/.../`."""

    def __init__(self, line: str, line_number: Optional[int] = None, reason: str = ""):
        self.line = line
        self.line_number = line_number
        self.reason = reason
        where = f"line {line_number}: " if line_number is not None else ""
        detail = f" ({reason})" if reason else ""
        super().__init__(f"{where}badly formatted entry{detail}: {line!r}")


class NoMoreEntries(CEDictError):
    """The stream is exhausted. Not a failure."""


class ReadError(CEDictError):
    """The underlying stream failed to produce the next line."""

    def __init__(self, error: BaseException, line_number: int = 0):
        self.error = error
        self.line_number = line_number
        super().__init__(f"read failed after line {line_number}: {error}")
