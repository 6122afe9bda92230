from exceptions import InvalidOption, InvalidRangeSpec
from models import PageRange
from settings import logger

from .document import PdfDocument
from .pages import every_page, parse_page_range

SPLIT_MODES = ("everyPage", "ranges")


def resolve_split_ranges(mode: str, range_str: str, page_count: int) -> list[PageRange]:
    if mode not in SPLIT_MODES:
        raise InvalidOption(f'Unknown split mode "{mode}"')

    if mode == "everyPage":
        return every_page(page_count)

    ranges = parse_page_range(range_str, page_count)
    if not ranges:
        raise InvalidRangeSpec(f'No page ranges in "{range_str}"')
    return ranges


def split_pdf(
    data: bytes,
    mode: str = "everyPage",
    range_str: str = "1-",
) -> list[tuple[PageRange, bytes]]:
    """
    Splits a PDF into one sub-document per page range.
    Returns (range, PDF bytes) pairs in range order.
    """
    with PdfDocument.load(data) as src:
        ranges = resolve_split_ranges(mode, range_str, src.page_count)

        parts: list[tuple[PageRange, bytes]] = []
        for page_range in ranges:
            with src.extract_pages(page_range.zero_based()) as part:
                parts.append((page_range, part.to_bytes()))

    logger.info(f"Split PDF into {len(parts)} part(s)")
    return parts


def split_pdf_to_pages(data: bytes) -> list[bytes]:
    """One single-page PDF per source page."""
    return [part for _, part in split_pdf(data, mode="everyPage")]


def part_file_name(part_index: int) -> str:
    return f"split-{part_index}.pdf"

