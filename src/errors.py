"""Exceptions and process exit codes for pdf2svg."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit status for a conversion run."""

    SUCCESS = 0
    USAGE_ERROR = -2
    OPEN_FAILED = -3
    CONVERSION_FAILED = -4
    TOO_MANY_PAGES = -5
    OPTION_PARSE_ERROR = -6
    INVALID_RANGE = -7


class PDF2SVGError(Exception):
    """Base exception for conversion failures."""

    exit_code = ExitCode.CONVERSION_FAILED


class UsageError(PDF2SVGError):
    """Raised when the wrong number of positional arguments is given."""

    exit_code = ExitCode.USAGE_ERROR


class OptionParseError(PDF2SVGError):
    """Raised when command line flags cannot be parsed."""

    exit_code = ExitCode.OPTION_PARSE_ERROR


class DocumentOpenError(PDF2SVGError):
    """Raised when the input PDF is missing, unreadable or corrupt."""

    exit_code = ExitCode.OPEN_FAILED


class InvalidRangeError(PDF2SVGError):
    """Raised when page bounds are inconsistent with the page count."""

    exit_code = ExitCode.INVALID_RANGE


class RangeTooLargeError(PDF2SVGError):
    """Raised when a page range covers more than MAX_PAGE_RANGE pages."""

    exit_code = ExitCode.TOO_MANY_PAGES


class PageNotFoundError(PDF2SVGError):
    """Raised when a page lookup by index or label finds nothing."""


class ConversionError(PDF2SVGError):
    """Raised when rendering a page or writing its SVG fails."""
