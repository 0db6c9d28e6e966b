"""Page selection: turns CLI selectors into the pages to convert."""

from dataclasses import dataclass

from .errors import InvalidRangeError, RangeTooLargeError

ALL_PAGES_LABEL = "all"
MAX_PAGE_RANGE = 9_999_999


@dataclass(frozen=True)
class SinglePage:
    """Exactly one page, either by zero-based index or by page label."""

    index: int | None = None
    label: str | None = None


@dataclass(frozen=True)
class PageRange:
    """Inclusive range of 1-based page numbers."""

    first: int
    last: int

    def page_numbers(self) -> range:
        """Return the 1-based page numbers in ascending order."""
        return range(self.first, self.last + 1)

    def __len__(self) -> int:
        return self.last - self.first + 1


PageSpec = SinglePage | PageRange


def select_pages(
    page_count: int,
    label: str | None = None,
    first: int = 0,
    last: int = 0,
) -> PageSpec:
    """Resolve page selectors against a document.

    Args:
        page_count: Number of pages in the opened document
        label: Page label from the command line, "all", or None
        first: 1-based first page, 0 when unset
        last: 1-based last page, 0 when unset

    Returns:
        SinglePage for the default first page or a label lookup,
        PageRange for "all" or explicit bounds

    Raises:
        InvalidRangeError: If last exceeds page_count or first exceeds last
        RangeTooLargeError: If the range is longer than MAX_PAGE_RANGE
    """
    if label is None and first == 0 and last == 0:
        return SinglePage(index=0)

    if label is not None and label != ALL_PAGES_LABEL:
        return SinglePage(label=label)

    if first <= 0:
        first = 1
    if last <= 0:
        last = page_count

    if last > page_count or first > last:
        raise InvalidRangeError(
            f"Invalid page range {first}-{last} for a document with {page_count} pages"
        )
    if last - first + 1 > MAX_PAGE_RANGE:
        raise RangeTooLargeError(f"Too many pages (>{MAX_PAGE_RANGE:,})")

    return PageRange(first, last)
