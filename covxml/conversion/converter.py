"""
Report converter: validate a request, build the report, write the XML.

The converter is the single operation a build orchestrator calls. Every
failure, whether a bad input or an error inside the coverage library, is
logged and returned as a failed ConversionResult; nothing propagates past
convert().
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..analysis.report import AnalyzerConfig, CoverageAnalyzer
from .errors import CollaboratorError, ConversionError
from .request import ConversionRequest

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Outcome of a conversion."""
    request: ConversionRequest
    error: Optional[ConversionError] = None
    percent_covered: Optional[float] = None

    @property
    def success(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.success

    def __str__(self) -> str:
        if self.success:
            return f"{self.request.output_path}: written ({self.percent_covered:.2f}% covered)"
        return f"{self.request.coverage_path}: FAILED - {self.error}"


class ReportConverter:
    """
    Converts coverage snapshots into XML reports.

    Usage:
        converter = ReportConverter()
        result = converter.convert(ConversionRequest(".coverage", "coverage.xml"))
        if not result:
            ...
    """

    def __init__(self, analyzer=None):
        """
        Args:
            analyzer: Object with an open_report(coverage_path,
                binary_search_paths, symbol_search_paths) method returning a
                context-managed report with write_xml(output_path).
                Defaults to a coverage.py backed CoverageAnalyzer.
        """
        self.analyzer = analyzer or CoverageAnalyzer()

    def convert(self, request: ConversionRequest) -> ConversionResult:
        """Run one conversion. Never raises for a failed conversion."""
        try:
            request.validate()
            percent = self._write_report(request)
        except ConversionError as e:
            logger.error(
                "Converting %s to XML failed: %s", request.coverage_path or "<unset>", e,
                exc_info=e,
            )
            return ConversionResult(request=request, error=e)

        logger.info(
            "Wrote coverage XML report to %s (%.2f%% covered)", request.output_path, percent,
        )
        return ConversionResult(request=request, percent_covered=percent)

    def _write_report(self, request: ConversionRequest) -> float:
        logger.debug(
            "Opening %s (binary paths: %s, symbol paths: %s)",
            request.coverage_path,
            list(request.binary_search_paths),
            list(request.symbol_search_paths),
        )
        try:
            with self.analyzer.open_report(
                request.coverage_path,
                request.binary_search_paths,
                request.symbol_search_paths,
            ) as report:
                return report.write_xml(request.output_path)
        except Exception as e:
            raise CollaboratorError(
                f"Coverage analysis of {request.coverage_path} failed: {e}",
                path=request.coverage_path,
            ) from e


def convert_coverage_to_xml(
    coverage_file,
    output_report_file,
    binary_search_paths: Optional[Iterable] = None,
    symbol_search_paths: Optional[Iterable] = None,
    config: Optional[AnalyzerConfig] = None,
) -> bool:
    """
    Convert a coverage snapshot to an XML report, returning True on success.

    This is the entry point for build orchestrators that only care about the
    task outcome; diagnostics go to the log.
    """
    request = ConversionRequest(
        coverage_path=coverage_file,
        output_path=output_report_file,
        binary_search_paths=binary_search_paths,
        symbol_search_paths=symbol_search_paths,
    )
    converter = ReportConverter(CoverageAnalyzer(config))
    return converter.convert(request).success
