"""Coverage analysis module - coverage.py backed report construction."""

from .report import AnalyzerConfig, CoverageAnalyzer, CoverageReport
from .sources import locate_source

__all__ = ["AnalyzerConfig", "CoverageAnalyzer", "CoverageReport", "locate_source"]
