"""
covxml - Main CLI entry point.

Build step:
1. Validate the coverage snapshot, search directories and output path
2. Load the snapshot with coverage.py, relocating sources if needed
3. Write the XML report

Exit status is 0 when the report was written and 1 otherwise, so a build
pipeline can treat the conversion as a single step outcome.
"""

import argparse
import logging
import sys

from . import __version__
from .analysis.report import AnalyzerConfig, CoverageAnalyzer
from .conversion.converter import ReportConverter
from .conversion.request import ConversionRequest


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="covxml",
        description="Convert a coverage.py data file into an XML coverage report",
    )
    parser.add_argument("--coverage-file", required=True, help="Path to the coverage data file")
    parser.add_argument("--output", required=True, help="Path of the XML report to write")
    parser.add_argument(
        "--binary-search-path", action="append", default=[], metavar="DIR",
        help="Directory of measured code to report on (repeatable)",
    )
    parser.add_argument(
        "--symbol-search-path", action="append", default=[], metavar="DIR",
        help="Directory searched for relocated source files (repeatable)",
    )
    parser.add_argument("--rcfile", default=None, help="coverage.py configuration file")
    parser.add_argument("--ignore-errors", action="store_true", help="Skip unreadable source files")
    parser.add_argument("--skip-empty", action="store_true", help="Omit empty files from the report")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[covxml] %(levelname)s %(message)s",
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    request = ConversionRequest(
        coverage_path=args.coverage_file,
        output_path=args.output,
        binary_search_paths=args.binary_search_path,
        symbol_search_paths=args.symbol_search_path,
    )
    config = AnalyzerConfig(
        rcfile=args.rcfile,
        ignore_errors=args.ignore_errors,
        skip_empty=args.skip_empty,
    )

    result = ReportConverter(CoverageAnalyzer(config)).convert(request)
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
