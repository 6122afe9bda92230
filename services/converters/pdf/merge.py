from contextlib import ExitStack
from typing import Iterable, Optional

from exceptions import CorruptDocument, NoInputDocuments
from settings import logger

from .document import PdfDocument


def merge_pdfs(
    sources: Iterable[Optional[bytes]],
    continue_on_fail: bool = False,
) -> tuple[bytes, int]:
    """
    Merges several PDFs into one.
    Sources are consumed strictly in order; every page of every source is
    appended. `None` entries stand for inputs the caller already dropped and
    are skipped. With `continue_on_fail`, unreadable sources are skipped too.
    Returns (merged PDF bytes, page count).
    """
    merged = PdfDocument()
    added = 0

    with ExitStack() as stack:
        stack.callback(merged.close)

        for index, data in enumerate(sources):
            if data is None:
                continue

            try:
                src = PdfDocument.load(data)
            except CorruptDocument as e:
                if continue_on_fail:
                    logger.warning(f"Merge: skipping unreadable input {index}: {e}")
                    continue
                e.item_index = index
                raise

            stack.enter_context(src)
            try:
                merged.append_pages(src, src.page_indices())
            except CorruptDocument as e:
                e.item_index = index
                raise
            added += 1

        if not added:
            raise NoInputDocuments()

        out = merged.to_bytes()
        page_count = merged.page_count

    logger.info(f"Merged {added} PDF(s) into {page_count} page(s)")
    return out, page_count
