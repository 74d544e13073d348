"""CC-CEDICT file ingestor.

Reads a whole dictionary into an IngestResult:
    - entries in source order
    - "#!" header metadata (version, date, ...)
    - line counts and one error message per skipped line

CC-CEDICT is distributed gzipped; files ending in .gz are decompressed
transparently.

Usage:
    from cedict.ingest import ingest

    result = ingest("cedict_1_0_ts_utf-8_mdbg.txt.gz")
    print(result.metadata.get("version"), len(result.entries))
"""

import gzip
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO

from .errors import BadFormatError, ReadError
from .parser import parse_entry, parse_metadata
from .schema import Entry, TokenType
from .tokenizer import LineTokenizer

logger = logging.getLogger(__name__)


@dataclass
class IngestResult:
    """Result of ingesting a dictionary source."""

    entries: list[Entry]
    source_path: str
    dict_name: str
    metadata: dict[str, str] = field(default_factory=dict)
    total_lines: int = 0        # All lines read, comments included
    total_comments: int = 0
    total_valid: int = 0        # Entries parsed successfully
    errors: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"IngestResult({self.dict_name}: "
            f"{self.total_valid} entries, "
            f"{self.total_comments} comments, "
            f"{len(self.errors)} errors)"
        )


class CEDictIngestor:
    """Ingestor for CC-CEDICT files and streams."""

    def __init__(self, encoding: str = "utf-8", skip_bad_lines: bool = True):
        """Initialize ingestor.

        Args:
            encoding: Encoding of the dictionary text.
            skip_bad_lines: Record malformed lines and continue. When False,
                the first BadFormatError propagates.
        """
        self.encoding = encoding
        self.skip_bad_lines = skip_bad_lines

    def get_dict_name(self, filepath: Path) -> str:
        """Generate dictionary name from filepath."""
        if filepath.suffix == ".gz":
            return Path(filepath.stem).stem
        return filepath.stem

    def open(self, filepath: Path) -> IO[bytes]:
        """Open a dictionary file for binary reading."""
        if filepath.suffix == ".gz":
            return gzip.open(filepath, "rb")
        return open(filepath, "rb")

    def ingest(self, filepath: Path | str) -> IngestResult:
        """Ingest dictionary from file.

        Args:
            filepath: Path to source file.

        Returns:
            IngestResult with entries and statistics.
        """
        filepath = Path(filepath)
        with self.open(filepath) as stream:
            return self.ingest_stream(
                stream,
                dict_name=self.get_dict_name(filepath),
                source_path=str(filepath.resolve()),
            )

    def ingest_stream(
        self,
        stream: IO,
        dict_name: str = "<stream>",
        source_path: str = "",
    ) -> IngestResult:
        """Ingest dictionary from an open stream.

        Raises:
            ReadError: The stream failed part way through.
            BadFormatError: A line is malformed and skip_bad_lines is False.
        """
        result = IngestResult(entries=[], source_path=source_path, dict_name=dict_name)
        scanner = LineTokenizer(stream, encoding=self.encoding)

        while scanner.advance():
            result.total_lines += 1

            if scanner.token_type is TokenType.COMMENT:
                result.total_comments += 1
                meta = parse_metadata(scanner.text)
                if meta is not None:
                    key, value = meta
                    result.metadata[key] = value
                continue

            try:
                entry = parse_entry(scanner.text, scanner.line_number)
            except BadFormatError as e:
                if not self.skip_bad_lines:
                    raise
                logger.warning("%s: skipping %s", dict_name, e)
                result.errors.append(str(e))
                continue

            result.entries.append(entry)

        if scanner.error is not None:
            raise ReadError(scanner.error, scanner.line_number) from scanner.error

        result.total_valid = len(result.entries)
        logger.info("%r", result)
        return result


def ingest(
    filepath: Path | str,
    encoding: str = "utf-8",
    skip_bad_lines: bool = True,
) -> IngestResult:
    """Convenience function to ingest a CC-CEDICT file.

    Args:
        filepath: Path to the dictionary (plain or .gz).
        encoding: Text encoding.
        skip_bad_lines: Skip and record malformed lines instead of raising.

    Returns:
        IngestResult with entries.
    """
    ingestor = CEDictIngestor(encoding=encoding, skip_bad_lines=skip_bad_lines)
    return ingestor.ingest(filepath)
