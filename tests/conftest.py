"""Shared fixtures for pdf2svg tests."""

from pathlib import Path

import pytest

# Page sizes in points; each page gets a distinct square size so the
# rendered SVG viewBox shows which page was converted.
PAGE_SIZES = [100, 200, 300]


@pytest.fixture
def sample_pdf(tmp_path) -> Path:
    """Create a three-page PDF labelled i, ii, iii."""
    import pymupdf

    path = tmp_path / "a.pdf"
    doc = pymupdf.open()
    for number, size in enumerate(PAGE_SIZES, start=1):
        page = doc.new_page(width=size, height=size)
        page.insert_text((10, 50), f"Test page {number}")
    doc.set_page_labels([{"startpage": 0, "prefix": "", "style": "r", "firstpagenum": 1}])
    doc.save(str(path))
    doc.close()
    return path



@pytest.fixture
def unlabelled_pdf(tmp_path) -> Path:
    """Create a three-page PDF without page labels."""
    import pymupdf

    path = tmp_path / "plain.pdf"
    doc = pymupdf.open()
    for number, size in enumerate(PAGE_SIZES, start=1):
        page = doc.new_page(width=size, height=size)
        page.insert_text((10, 50), f"Plain page {number}")
    doc.save(str(path))
    doc.close()
    return path
