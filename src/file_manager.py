"""Input path resolution and output filename generation for pdf2svg."""

import logging
import os
import re
from pathlib import Path

logger = logging.getLogger(__name__)

# printf-style integer conversion, e.g. %d, %03d, %-5i, %ld; %% is a literal percent
_CONVERSION = re.compile(
    r"%%|%(?P<spec>[-+ #0]*\d*(?:\.\d+)?)(?:hh|h|ll|l|j|z|t)?(?P<conversion>[diouxX])"
)


def resolve_input_path(path: str | os.PathLike) -> str:
    """Make a path absolute by joining it onto the current directory.

    Absolute paths are returned unchanged. No check is made that the
    path exists.

    Args:
        path: Absolute or relative file path

    Returns:
        Absolute path string
    """
    path = os.fspath(path)
    if os.path.isabs(path):
        return path
    return os.path.join(os.getcwd(), path)


def document_locator(path: str | os.PathLike) -> str:
    """Return the file:// URI of the resolved input path.

    PyMuPDF opens documents by file path, so the locator is only used in
    diagnostics.
    """
    return Path(resolve_input_path(path)).as_uri()


def has_page_placeholder(template: str) -> bool:
    """Check whether an output template contains a page-number placeholder."""
    return any(match.group("conversion") for match in _CONVERSION.finditer(template))


def format_output_path(template: str, page_number: int) -> str:
    """Substitute a 1-based page number into an output path template.

    Args:
        template: Output path, optionally with one printf-style integer
            placeholder such as ``page-%d.svg``, ``page-%04d.svg`` or
            ``page-%ld.svg``
        page_number: 1-based page number

    Returns:
        The expanded path. Templates without a placeholder are returned
        as-is apart from ``%%`` collapsing to ``%``.

    Raises:
        ValueError, TypeError: If the template is not a valid format string
    """
    # Python's % operator has no C length modifiers
    template = _CONVERSION.sub(_drop_length_modifier, template)
    if not has_page_placeholder(template):
        return template % ()
    return template % page_number


def _drop_length_modifier(match: re.Match) -> str:
    if match.group("conversion") is None:
        return match.group(0)
    return f"%{match.group('spec')}{match.group('conversion')}"
