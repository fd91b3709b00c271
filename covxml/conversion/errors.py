"""Errors reported by a coverage-to-XML conversion."""

from typing import Optional


class ConversionError(Exception):
    """Base class for every failure of a conversion."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class MissingFileError(ConversionError, FileNotFoundError):
    """The coverage snapshot does not exist."""


class MissingDirectoryError(ConversionError, FileNotFoundError):
    """A binary or symbol search directory does not exist."""


class InvalidArgumentError(ConversionError, ValueError):
    """A required argument is missing or empty."""


class CollaboratorError(ConversionError):
    """The coverage analysis library failed to build or write the report."""
