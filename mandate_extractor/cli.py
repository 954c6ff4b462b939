"""Command-line interface: extract the last page of each given PDF."""

import argparse
import os
import sys
from typing import Optional, Sequence

from mandate_extractor.api import process_multiple_pdfs
from mandate_extractor.exceptions import MandateExtractorError
from mandate_extractor.logger import setup_logging
from mandate_extractor.models import Outcome


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mandate-extractor",
        description="PDF Last-Page Extractor",
        epilog="Output files are named: {original}_mandate_{ddmmyyyy}.pdf",
    )
    parser.add_argument("pdfs", nargs="*", metavar="pdf", help="PDF files to process")
    parser.add_argument(
        "--concurrency",
        type=_positive_int,
        default=5,
        metavar="N",
        help="Maximum parallel operations (default: 5)",
    )
    parser.add_argument(
        "--output",
        metavar="DIR",
        help="Output directory (default: same as input)",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first file that fails",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


def _print_progress(current: int, total: int, outcome: Outcome) -> None:
    status = "OK" if outcome.success else "FAILED"
    print(f"[{current}/{total}] {status}: {os.path.basename(outcome.input_path)}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()

    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    pdf_paths = [os.path.abspath(path) for path in args.pdfs]
    if not pdf_paths:
        print("Error: No PDF files specified", file=sys.stderr)
        return 1

    output_dir = os.path.abspath(args.output) if args.output else None

    print(f"Processing {len(pdf_paths)} PDF(s) with concurrency={args.concurrency}")

    try:
        report = process_multiple_pdfs(
            pdf_paths,
            concurrency=args.concurrency,
            output_dir=output_dir,
            continue_on_error=not args.fail_fast,
            on_progress=_print_progress,
        )
    except MandateExtractorError as exc:
        print(f"Fatal error: {exc}", file=sys.stderr)
        return 1

    print()
    print(f"Completed: {report.succeeded} succeeded, {report.failed} failed")

    if report.failed > 0:
        print()
        print("Errors:")
        for error in report.errors:
            print(f"  - {os.path.basename(error.file_path)}: {error}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
