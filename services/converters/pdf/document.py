from __future__ import annotations

from io import BytesIO
from typing import Iterable

from PyPDF2 import PdfReader, PdfWriter

from exceptions import CorruptDocument
from settings import logger


class PdfDocument:
    """
    Page-addressable PDF.

    A loaded document reads pages from its source buffer; a new document
    collects copied pages in a PdfWriter. Pages are copied as page objects
    together with their resources, so fonts and images travel with them.
    """

    def __init__(self, reader: PdfReader | None = None, stream: BytesIO | None = None):
        self._reader = reader
        self._stream = stream
        self._writer = None if reader is not None else PdfWriter()

    @classmethod
    def load(cls, data: bytes) -> "PdfDocument":
        stream = BytesIO(data)
        try:
            reader = PdfReader(stream)
            if reader.is_encrypted:
                # owner-password-only files open with an empty user password
                reader.decrypt("")
            len(reader.pages)
        except Exception as e:
            stream.close()
            logger.error(f"PDF open error: {e}")
            raise CorruptDocument(f"Could not parse PDF: {e}") from e

        return cls(reader, stream)

    @property
    def pages(self):
        if self._reader is not None:
            return self._reader.pages
        return self._writer.pages

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def page_indices(self) -> list[int]:
        return list(range(self.page_count))

    def append_pages(self, source: "PdfDocument", indices: Iterable[int]) -> None:
        """Copy pages of `source` (zero-based, in order, repeats allowed) to the end."""
        if self._writer is None:
            raise TypeError("Pages can only be appended to a new document")

        source_pages = source.pages
        for index in indices:
            page = source_pages[index]
            try:
                self._writer.add_page(page)
            except Exception as e:
                logger.error(f"PDF page copy error: {e}")
                raise CorruptDocument(f"Could not copy page {index + 1}: {e}") from e

    def extract_pages(self, indices: Iterable[int]) -> "PdfDocument":
        new_doc = PdfDocument()
        new_doc.append_pages(self, indices)
        return new_doc

    def to_bytes(self) -> bytes:
        writer = self._writer
        if writer is None:
            writer = self.extract_pages(self.page_indices())._writer

        buf = BytesIO()
        try:
            writer.write(buf)
        except Exception as e:
            logger.error(f"PDF write error: {e}")
            raise CorruptDocument(f"Could not write PDF: {e}") from e
        return buf.getvalue()

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
        self._stream = None
        self._reader = None
        self._writer = None

    def __enter__(self) -> "PdfDocument":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def load_pdf(data: bytes) -> PdfDocument:
    return PdfDocument.load(data)


def extract_pages(doc: PdfDocument, indices: Iterable[int]) -> PdfDocument:
    return doc.extract_pages(indices)


def serialize_pdf(doc: PdfDocument) -> bytes:
    return doc.to_bytes()
