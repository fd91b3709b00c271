"""Conversion module - request validation and the report converter."""

from .errors import (
    ConversionError,
    MissingFileError,
    MissingDirectoryError,
    InvalidArgumentError,
    CollaboratorError,
)
from .request import ConversionRequest
from .converter import ReportConverter, ConversionResult, convert_coverage_to_xml

__all__ = [
    "ConversionError",
    "MissingFileError",
    "MissingDirectoryError",
    "InvalidArgumentError",
    "CollaboratorError",
    "ConversionRequest",
    "ReportConverter",
    "ConversionResult",
    "convert_coverage_to_xml",
]
