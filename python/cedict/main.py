"""cedict CLI - CC-CEDICT reader.

Usage:
    python -m cedict.main cedict_ts.u8 --format jsonl -o entries.jsonl
    python -m cedict.main cedict_1_0_ts_utf-8_mdbg.txt.gz --format tsv --limit 10
    python -m cedict.main --render "yi1 lan3 zi5"
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import IO, Optional

from . import config as cfg
from .errors import CEDictError
from .ingest import CEDictIngestor, IngestResult
from .pinyin import render_tone_marks, render_toneless
from .schema import Entry

logger = logging.getLogger("cedict")


def write_entries(entries: list[Entry], out: IO[str], fmt: str) -> None:
    """Write entries in the requested output format."""
    if fmt == "json":
        json.dump([e.to_dict() for e in entries], out, indent=2, ensure_ascii=False)
        out.write("\n")
    elif fmt == "tsv":
        for entry in entries:
            out.write(entry.to_tsv() + "\n")
    elif fmt == "jsonl":
        for entry in entries:
            out.write(json.dumps(entry.to_dict(), ensure_ascii=False) + "\n")
    else:
        raise ValueError(f"Unknown output format: {fmt}. Available: {cfg.OUTPUT_FORMATS}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser, with defaults from config.json.

    Raises:
        ValueError: If config.json names an unknown output format.
    """
    output_format = cfg.default_output_format()
    encoding = cfg.default_encoding()

    parser = argparse.ArgumentParser(
        prog="cedict",
        description="cedict - CC-CEDICT dictionary reader",
    )
    parser.add_argument(
        "source",
        nargs="?",
        help="Dictionary file (plain or .gz), or - for stdin",
    )
    parser.add_argument(
        "--render",
        "-r",
        metavar="PINYIN",
        help='Render numbered pinyin (e.g. "yi1 lan3 zi5") and exit',
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=cfg.OUTPUT_FORMATS,
        default=output_format,
        help=f"Output format (default: {output_format})",
    )
    parser.add_argument(
        "--encoding",
        "-e",
        default=encoding,
        help=f"Source text encoding (default: {encoding})",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=cfg.default_strict(),
        help="Abort on the first malformed entry line",
    )
    parser.add_argument(
        "--limit",
        "-n",
        type=int,
        help="Write at most N entries",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=cfg.default_verbose(),
        help="Log progress to stderr",
    )
    return parser


def run_ingest(args: argparse.Namespace) -> IngestResult:
    ingestor = CEDictIngestor(encoding=args.encoding, skip_bad_lines=not args.strict)
    if args.source == "-":
        return ingestor.ingest_stream(sys.stdin.buffer, dict_name="stdin")
    return ingestor.ingest(args.source)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    try:
        parser = build_parser()
    except ValueError as e:
        print(f"ERROR - {e}", file=sys.stderr)
        return 1
    args = parser.parse_args(argv)

    if args.limit is not None and args.limit < 0:
        parser.error("--limit must be 0 or greater")

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if args.render is not None:
        print(render_tone_marks(args.render))
        print(render_toneless(args.render))
        return 0

    if not args.source:
        parser.error("a source file is required unless --render is given")

    try:
        result = run_ingest(args)
    except (CEDictError, OSError) as e:
        logger.error("%s", e)
        return 1

    for key, value in sorted(result.metadata.items()):
        logger.info("%s = %s", key, value)
    if result.errors:
        logger.warning("Skipped %d malformed lines", len(result.errors))

    entries = result.entries
    if args.limit is not None:
        entries = entries[:args.limit]

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            write_entries(entries, f, args.format)
        logger.info("Wrote %d entries to %s", len(entries), args.output)
    else:
        write_entries(entries, sys.stdout, args.format)

    return 0


if __name__ == "__main__":
    sys.exit(main())
