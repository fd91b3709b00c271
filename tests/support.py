"""Shared helpers for the covxml tests: snapshots, source trees, log capture, runner."""

import logging
import os
import xml.etree.ElementTree as ET
from pathlib import Path

import coverage

# Statements on lines 1, 2, 5 and 6
SOURCE = """\
def add(a, b):
    return a + b


x = add(1, 2)
y = x * 2
"""


def write_source(directory: Path, relative: str, text: str = SOURCE) -> Path:
    """Write a Python source file under directory, creating parents."""
    path = directory / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


def write_snapshot(path: Path, lines: dict) -> Path:
    """Write a coverage.py data file recording the given executed lines."""
    data = coverage.CoverageData(basename=str(path))
    data.add_lines({os.fspath(f): list(l) for f, l in lines.items()})
    data.write()
    return path


def read_line_hits(xml_path: Path) -> dict:
    """Parse a Cobertura report into {class filename: {line: hits}}."""
    root = ET.parse(xml_path).getroot()
    result = {}
    for cls in root.iter("class"):
        hits = {}
        for line in cls.iter("line"):
            hits[int(line.get("number"))] = int(line.get("hits"))
        result[cls.get("filename")] = hits
    return result


def expect_error(error_type, func, *args, **kwargs):
    """Call func and return the error_type exception it raised."""
    try:
        func(*args, **kwargs)
    except error_type as e:
        return e
    raise AssertionError(f"expected {error_type.__name__}")


def hits_for(report: dict, name: str) -> dict:
    """Return the line hits of the single reported file ending with name."""
    matches = [f for f in report if f.replace("\\", "/").endswith(name)]
    assert len(matches) == 1, f"expected one report entry for {name}, got {sorted(report)}"
    return report[matches[0]]


class RecordingHandler(logging.Handler):
    """Collects the records of a logger while used as a context manager."""

    def __init__(self, logger_name: str = "covxml"):
        super().__init__(level=logging.DEBUG)
        self.records = []
        self._logger = logging.getLogger(logger_name)
        self._previous_level = self._logger.level

    def emit(self, record):
        self.records.append(record)

    def __enter__(self):
        self._logger.addHandler(self)
        self._logger.setLevel(logging.DEBUG)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._logger.removeHandler(self)
        self._logger.setLevel(self._previous_level)

    def at(self, level) -> list:
        return [r for r in self.records if r.levelno == level]


def run_test_classes(test_classes) -> int:
    """Run pytest-style test classes without pytest and report results."""
    import traceback

    total_tests = 0
    passed_tests = 0
    failed_tests = []

    for test_class in test_classes:
        print(f"\n{'='*60}")
        print(f"Running {test_class.__name__}")
        print('='*60)

        instance = test_class()
        test_methods = [m for m in dir(instance) if m.startswith('test_')]

        for method_name in test_methods:
            total_tests += 1
            if hasattr(instance, "setup_method"):
                instance.setup_method()
            try:
                getattr(instance, method_name)()
                print(f"  ✓ {method_name}")
                passed_tests += 1
            except AssertionError as e:
                print(f"  ✗ {method_name}")
                print(f"    AssertionError: {e}")
                failed_tests.append((test_class.__name__, method_name, str(e)))
            except Exception as e:
                print(f"  ✗ {method_name}")
                print(f"    {type(e).__name__}: {e}")
                traceback.print_exc()
                failed_tests.append((test_class.__name__, method_name, str(e)))
            finally:
                if hasattr(instance, "teardown_method"):
                    instance.teardown_method()

    print(f"\nResults: {passed_tests}/{total_tests} tests passed")

    if failed_tests:
        print("\nFailed tests:")
        for class_name, method_name, error in failed_tests:
            print(f"  - {class_name}.{method_name}: {error}")
        return 1

    print("\nAll tests passed!")
    return 0
