from exceptions import InvalidRangeSpec
from models import PageRange


def _to_int(value: str, part: str) -> int:
    # plain ASCII digits: no sign, underscores or other scripts
    if not (value.isascii() and value.isdigit()):
        raise InvalidRangeSpec(f'Invalid range "{part}"')
    return int(value)


def parse_page_range(range_str: str, max_pages: int) -> list[PageRange]:
    """
    '1,3-5,7,10-' (max_pages=12) → [(1,1), (3,5), (7,7), (10,12)]

    Pages are 1-based and inclusive. Open ends default to the first and
    last page, explicit ends are clamped to the document. Order, duplicates
    and overlaps are kept exactly as written.
    """
    ranges: list[PageRange] = []
    for part in (range_str or "").split(","):
        part = part.strip()
        if not part:
            continue

        if "-" in part:
            start_s, end_s = (s.strip() for s in part.split("-", 1))
            start = max(1, _to_int(start_s, part) if start_s else 1)
            end = min(max_pages, _to_int(end_s, part) if end_s else max_pages)
            if start > end:
                raise InvalidRangeSpec(f'Invalid range "{part}"')
            ranges.append(PageRange(start, end))
        else:
            page = _to_int(part, part)
            if page < 1 or page > max_pages:
                raise InvalidRangeSpec(
                    f'Invalid page "{part}": document has {max_pages} page(s)'
                )
            ranges.append(PageRange(page, page))

    return ranges


def every_page(max_pages: int) -> list[PageRange]:
    """One single-page range per page, 1..max_pages."""
    return [PageRange(p, p) for p in range(1, max_pages + 1)]


def whole_document(max_pages: int) -> list[PageRange]:
    if max_pages < 1:
        return []
    return [PageRange(1, max_pages)]
