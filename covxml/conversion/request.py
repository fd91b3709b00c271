"""
Conversion request: the four inputs of a coverage-to-XML conversion.

A request names the coverage snapshot, the directories holding the measured
code (binary search paths), the directories holding its source text
(symbol search paths) and the destination of the XML report.
"""

import os
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .errors import InvalidArgumentError, MissingDirectoryError, MissingFileError


def _as_paths(paths: Optional[Iterable]) -> tuple[str, ...]:
    if paths is None:
        return ()
    if isinstance(paths, (str, os.PathLike)):
        return (os.fspath(paths),)
    return tuple(os.fspath(p) for p in paths)


@dataclass(frozen=True)
class ConversionRequest:
    """Inputs of a single conversion, passed by value."""
    coverage_path: str
    output_path: str
    binary_search_paths: tuple[str, ...] = field(default_factory=tuple)
    symbol_search_paths: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Normalize so callers may pass Path objects, lists or None
        object.__setattr__(
            self, "coverage_path",
            os.fspath(self.coverage_path) if self.coverage_path is not None else "",
        )
        object.__setattr__(
            self, "output_path",
            os.fspath(self.output_path) if self.output_path is not None else "",
        )
        object.__setattr__(self, "binary_search_paths", _as_paths(self.binary_search_paths))
        object.__setattr__(self, "symbol_search_paths", _as_paths(self.symbol_search_paths))

    def validate(self) -> None:
        """
        Check the request, failing fast on the first problem found.

        The output path is checked first, then the snapshot, then every binary
        search path and every symbol search path in sequence order.

        Raises:
            InvalidArgumentError: output_path is empty
            MissingFileError: coverage_path is not an existing file
            MissingDirectoryError: a search path is not an existing directory
        """
        if not self.output_path:
            raise InvalidArgumentError("output_path must be a valid path.")

        if not os.path.isfile(self.coverage_path):
            raise MissingFileError(
                f"Could not locate the code coverage file {self.coverage_path!r}.",
                path=self.coverage_path,
            )

        for directory in self.binary_search_paths:
            if not os.path.isdir(directory):
                raise MissingDirectoryError(
                    f"Could not find the binary search path directory {directory}.",
                    path=directory,
                )

        for directory in self.symbol_search_paths:
            if not os.path.isdir(directory):
                raise MissingDirectoryError(
                    f"Could not find the symbol search path directory {directory}.",
                    path=directory,
                )
