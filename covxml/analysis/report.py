"""
Coverage report construction on top of coverage.py.

This module handles:
1. Staging the coverage snapshot in a scratch workspace
2. Relocating recorded source paths under the symbol search paths
3. Loading the staged data into coverage.py and writing the XML report

The caller's snapshot is never modified; all work happens on a copy.
"""

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

import coverage

from .sources import locate_source

logger = logging.getLogger(__name__)


@dataclass
class AnalyzerConfig:
    """Options passed through to coverage.py."""
    rcfile: Optional[str] = None  # None: ignore any .coveragerc in the working directory
    ignore_errors: bool = False
    skip_empty: bool = False
    temp_dir: Optional[str] = None  # parent of the scratch workspaces, default system temp


class CoverageReport:
    """
    Coverage data loaded for reporting.

    The report owns a scratch workspace that is removed by close(). Use it as
    a context manager so the workspace is released on every exit path.
    """

    def __init__(
        self,
        cov: coverage.Coverage,
        workdir: Path,
        include: Optional[list[str]] = None,
        config: Optional[AnalyzerConfig] = None,
    ):
        self.coverage = cov
        self.workdir = workdir
        self.include = include
        self.config = config or AnalyzerConfig()
        self.closed = False

    def write_xml(self, output_path) -> float:
        """
        Write the report as XML, overwriting any existing file.

        Args:
            output_path: Destination of the XML report

        Returns:
            Total coverage percentage
        """
        if self.closed:
            raise ValueError("Cannot write a closed coverage report")

        output = Path(output_path)
        output.parent.mkdir(parents=True, exist_ok=True)

        return self.coverage.xml_report(
            outfile=str(output),
            include=self.include,
            ignore_errors=self.config.ignore_errors,
            skip_empty=self.config.skip_empty,
        )

    def close(self):
        """Release the coverage data and remove the scratch workspace."""
        if self.closed:
            return
        self.closed = True
        self.coverage = None
        shutil.rmtree(self.workdir, ignore_errors=True)
        logger.debug("Removed workspace %s", self.workdir)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class CoverageAnalyzer:
    """
    Builds CoverageReport objects from coverage.py data files.

    Usage:
        analyzer = CoverageAnalyzer()
        with analyzer.open_report(".coverage", ["src"], []) as report:
            report.write_xml("coverage.xml")
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        self.config = config or AnalyzerConfig()

    def open_report(
        self,
        coverage_path,
        binary_search_paths: Sequence[str] = (),
        symbol_search_paths: Sequence[str] = (),
    ) -> CoverageReport:
        """
        Open a coverage snapshot for reporting.

        Args:
            coverage_path: coverage.py data file written by the test run
            binary_search_paths: Directories whose measured files are reported
                (empty: every measured file)
            symbol_search_paths: Directories searched for source files that do
                not exist at their recorded location

        Returns:
            CoverageReport owning a scratch workspace
        """
        workdir = Path(tempfile.mkdtemp(prefix="covxml_", dir=self.config.temp_dir))
        try:
            staged = self._stage_data(Path(coverage_path), workdir, symbol_search_paths)

            cov = coverage.Coverage(
                data_file=str(staged),
                config_file=self.config.rcfile or False,
            )
            cov.load()
        except Exception:
            shutil.rmtree(workdir, ignore_errors=True)
            raise

        include = None
        if binary_search_paths:
            include = [os.path.join(os.path.abspath(d), "*") for d in binary_search_paths]

        return CoverageReport(cov, workdir, include=include, config=self.config)

    def _stage_data(
        self,
        coverage_path: Path,
        workdir: Path,
        symbol_search_paths: Sequence[str],
    ) -> Path:
        """
        Copy the snapshot into the workspace with relocated source paths.

        Returns:
            Path to the staged data file
        """
        snapshot = workdir / "snapshot.coverage"
        shutil.copy(coverage_path, snapshot)

        source = coverage.CoverageData(basename=str(snapshot))
        source.read()

        staged_path = workdir / ".coverage"
        staged = coverage.CoverageData(basename=str(staged_path))

        relocated = 0
        measured = sorted(source.measured_files())
        for recorded in measured:
            filename = locate_source(recorded, symbol_search_paths)
            if filename != recorded:
                relocated += 1
                logger.debug("Relocated %s -> %s", recorded, filename)

            if source.has_arcs():
                staged.add_arcs({filename: source.arcs(recorded) or []})
            else:
                staged.add_lines({filename: source.lines(recorded) or []})

            tracer = source.file_tracer(recorded)
            if tracer:
                staged.add_file_tracers({filename: tracer})

        staged.write()

        logger.info(
            "Staged %d measured files from %s (%d relocated)",
            len(measured), coverage_path, relocated,
        )
        return staged_path
