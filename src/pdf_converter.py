"""PDF page to SVG conversion using PyMuPDF."""

import logging
from pathlib import Path

import pymupdf

from .errors import ConversionError, DocumentOpenError, PageNotFoundError

logger = logging.getLogger(__name__)

# MuPDF's own exceptions derive from FzErrorBase, not RuntimeError
ENGINE_ERRORS = (RuntimeError, OSError, ValueError, pymupdf.mupdf.FzErrorBase)


class PDFPageConverter:
    """Converts PDF pages to standalone SVG files using PyMuPDF."""

    def __init__(self, text_as_path: bool = True):
        """Initialize converter.

        Args:
            text_as_path: Render glyphs as vector outlines (print rendering).
                When False, text is written as SVG <text> elements and
                depends on fonts available to the SVG viewer.
        """
        self.text_as_path = text_as_path

    def open_document(self, pdf_path: str | Path) -> pymupdf.Document:
        """Open a PDF document.

        Args:
            pdf_path: Path to the PDF file

        Returns:
            The open document, usable as a context manager

        Raises:
            DocumentOpenError: If the file is missing, unreadable, not a PDF
                or password protected
        """
        try:
            doc = pymupdf.open(str(pdf_path), filetype="pdf")
        except ENGINE_ERRORS as e:
            raise DocumentOpenError(f"Unable to open file {pdf_path}: {e}") from e

        if doc.needs_pass:
            doc.close()
            raise DocumentOpenError(f"Unable to open file {pdf_path}: document is encrypted")
        return doc

    def load_page(self, doc: pymupdf.Document, page_index: int) -> pymupdf.Page | None:
        """Load a page by zero-based index, or None if there is no such page."""
        if page_index < 0 or page_index >= len(doc):
            return None
        try:
            return doc.load_page(page_index)
        except ENGINE_ERRORS as e:
            logger.debug(f"Could not load page index {page_index}: {e}")
            return None

    def load_page_by_label(self, doc: pymupdf.Document, label: str) -> pymupdf.Page | None:
        """Load the first page carrying a page label, or None if no page does.

        Documents without page labels treat a plain decimal label as a
        1-based page number.
        """
        if not doc.get_page_labels():
            if not (label.isascii() and label.isdigit()):
                return None
            return self.load_page(doc, int(label) - 1)

        numbers = doc.get_page_numbers(label, only_one=True)
        if not numbers:
            return None
        return self.load_page(doc, numbers[0])

    def convert_page(self, page: pymupdf.Page | None, output_path: str | Path) -> Path:
        """Render a single PDF page to an SVG file.

        The SVG has the page's own size in points and an identity transform.

        Args:
            page: Loaded page, or None when the lookup failed
            output_path: Path for the output SVG file

        Returns:
            Path to the written SVG file

        Raises:
            PageNotFoundError: If page is None; nothing is written
            ConversionError: If rendering or writing the SVG fails
        """
        if page is None:
            logger.error("Page does not exist")
            raise PageNotFoundError("Page does not exist")

        output_path = Path(output_path)
        try:
            width, height = page.rect.width, page.rect.height
            svg = page.get_svg_image(matrix=pymupdf.Identity, text_as_path=self.text_as_path)

            with open(output_path, "w", encoding="utf-8") as f:
                f.write(svg)
                f.flush()
        except ENGINE_ERRORS as e:
            logger.error(f"Failed to convert page {page.number + 1} to {output_path}: {e}")
            raise ConversionError(f"Failed to convert page {page.number + 1}: {e}") from e

        logger.info(
            f"Rendered page {page.number + 1} ({width:g}x{height:g}pt) to {output_path}"
        )
        return output_path
