"""
Cash-flow workbook parser: CLI entry point.

Usage:
    python parser.py [<excel_file>] [--url <xlsx_url>] [--output <data.json>]
                     [--year <year>]

Loads a cash-flow workbook (from a local file, or downloaded from
--url / the ONEDRIVE_XLSX_URL environment variable), extracts the
dashboard tables and the monthly detail blocks from its first sheet,
and writes the result as a single JSON file (default: data/data.json).
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

import dotenv

from dto.output import ExtractionResult
from extractors.grid import WorkbookFormatError, load_workbook_source
from extractors.workbook import WorkbookExtractor
from utils.download import WorkbookDownloadError, fetch_workbook_bytes
from utils.output import write_result

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
)
logger = logging.getLogger(__name__)

_DEFAULT_OUTPUT = os.path.join("data", "data.json")


# -------------------------------------------------------------------
# Main pipeline
# -------------------------------------------------------------------


def parse_workbook(source: bytes | str | Path, year: int | None = None) -> ExtractionResult:
    """
    Parse a workbook (raw bytes or a file path) and return the
    structured ``ExtractionResult``.
    """
    if isinstance(source, bytes):
        logger.info("Loading workbook from %d downloaded byte(s)", len(source))
    else:
        logger.info("Loading workbook: %s", source)

    workbook = load_workbook_source(source)
    try:
        extractor = WorkbookExtractor() if year is None else WorkbookExtractor(year=year)
        return extractor.extract(workbook)
    finally:
        workbook.close()


# -------------------------------------------------------------------
# CLI
# -------------------------------------------------------------------


def main() -> None:
    # Settings are read lazily, so .env only has to be loaded before the
    # extractor is built.  Search from the working directory.
    dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True))

    parser = argparse.ArgumentParser(
        description="Convert a cash-flow workbook into the dashboard JSON document.",
    )
    parser.add_argument(
        "excel_file",
        nargs="?",
        default=None,
        help="Path to a local .xlsx file (default: download from --url)",
    )
    parser.add_argument(
        "-u",
        "--url",
        default=os.getenv("ONEDRIVE_XLSX_URL"),
        help="Direct download URL of the .xlsx (default: $ONEDRIVE_XLSX_URL)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=os.getenv("OUTPUT_PATH", _DEFAULT_OUTPUT),
        help="Output JSON file path (default: data/data.json)",
    )
    parser.add_argument(
        "-y",
        "--year",
        type=int,
        default=None,
        help="Year applied to every month (default: $REPORT_YEAR or 2026)",
    )
    args = parser.parse_args()

    if args.excel_file:
        if not os.path.isfile(args.excel_file):
            logger.error("File not found: %s", args.excel_file)
            sys.exit(1)
        source: bytes | str = args.excel_file
    elif args.url:
        try:
            source = fetch_workbook_bytes(args.url)
        except (WorkbookDownloadError, OSError) as exc:
            logger.error("%s", exc)
            sys.exit(1)
    else:
        logger.error(
            "No input: pass an .xlsx path or set ONEDRIVE_XLSX_URL / --url"
        )
        sys.exit(1)

    try:
        result = parse_workbook(source, year=args.year)
    except WorkbookFormatError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    write_result(result, args.output)


if __name__ == "__main__":
    main()
