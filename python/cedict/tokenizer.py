"""Tokenizer for CC-CEDICT streams.

Tokenizing is done by creating a CEDict over any readable stream (binary or
text). It is the caller's responsibility to supply CEDICT-formatted data and
to close the stream.

Usage:
    with open("cedict_ts.u8", "rb") as f:
        dict_ = CEDict(f)
        while True:
            try:
                entry = dict_.advance_to_next_entry()
            except NoMoreEntries:
                break
            print(entry.simplified, entry.definitions[0])

Comments are skipped by CEDict. To read them, drive the lower-level
LineTokenizer (available as CEDict.scanner) directly:

    scanner = LineTokenizer(f)
    while scanner.advance():
        if scanner.token_type is TokenType.COMMENT:
            print(scanner.text)
    if scanner.error:
        raise scanner.error
"""

from typing import IO, Iterator, Optional, Union

from .errors import NoMoreEntries, ReadError
from .parser import parse_entry
from .schema import Entry, TokenType

BOM = "\ufeff"


class LineTokenizer:
    """Reads a stream one line at a time and classifies each line."""

    def __init__(
        self,
        stream: IO,
        encoding: str = "utf-8",
        comment_char: str = "#",
    ):
        """Initialize tokenizer.

        Args:
            stream: Object with a readline() method returning bytes or str.
            encoding: Encoding used to decode binary streams.
            comment_char: Leading character that marks a comment line.
        """
        self.stream = stream
        self.encoding = encoding
        self.comment_char = comment_char

        self.text = ""
        self.token_type: Optional[TokenType] = None
        self.line_number = 0
        self.error: Optional[Exception] = None
        self._done = False

    def advance(self) -> bool:
        """Read and classify the next line.

        Returns:
            False once the stream is exhausted or a read failed; the failure,
            if any, is kept in self.error.
        """
        if self._done:
            return False

        try:
            raw: Union[bytes, str] = self.stream.readline()
            if isinstance(raw, bytes):
                raw = raw.decode(self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            self.error = e
            self._done = True
            return False

        if not raw:
            self._done = True
            return False

        self.line_number += 1
        if raw.endswith("\n"):
            raw = raw[:-1]
            if raw.endswith("\r"):
                raw = raw[:-1]
        if self.line_number == 1 and raw.startswith(BOM):
            raw = raw[len(BOM):]

        self.text = raw
        self.token_type = TokenType.classify(raw, self.comment_char)
        return True

    @property
    def exhausted(self) -> bool:
        """True once advance() has returned False."""
        return self._done


class CEDict:
    """Entry cursor over a CC-CEDICT stream.

    advance_to_next_entry() skips comments, parses the next entry line and
    keeps it as the current entry. A malformed line raises BadFormatError;
    calling again resumes with the following line.
    """

    def __init__(self, stream: IO, encoding: str = "utf-8"):
        self.scanner = LineTokenizer(stream, encoding=encoding)
        self._entry: Optional[Entry] = None

    @property
    def entry(self) -> Optional[Entry]:
        """The most recently parsed entry, or None."""
        return self._entry

    def advance_to_next_entry(self) -> Entry:
        """Advance to the next entry line and parse it.

        Returns:
            The new current Entry.

        Raises:
            NoMoreEntries: The stream is exhausted.
            ReadError: The stream failed; the original exception is chained.
            BadFormatError: The next entry line is malformed.
        """
        while self.scanner.advance():
            if self.scanner.token_type is TokenType.ENTRY:
                self._entry = parse_entry(self.scanner.text, self.scanner.line_number)
                return self._entry

        self._entry = None
        if self.scanner.error is not None:
            raise ReadError(
                self.scanner.error, self.scanner.line_number
            ) from self.scanner.error
        raise NoMoreEntries("No more entries to read")

    def __iter__(self) -> Iterator[Entry]:
        while True:
            try:
                yield self.advance_to_next_entry()
            except NoMoreEntries:
                return
