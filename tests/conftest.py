from __future__ import annotations

from io import BytesIO
from typing import Callable

import fitz
import pytest
from PIL import Image
from PyPDF2 import PdfReader

from models import Payload, Record

# Page widths double as page identities in assertions.
BASE_WIDTH = 100


def build_pdf(widths: list[int], height: int = 144) -> bytes:
    doc = fitz.open()
    for i, width in enumerate(widths, start=1):
        page = doc.new_page(width=width, height=height)
        page.insert_text((10, 40), f"Page {i}", fontsize=12)
    data = doc.tobytes()
    doc.close()
    return data


def page_widths(data: bytes) -> list[int]:
    reader = PdfReader(BytesIO(data))
    return [round(float(page.mediabox.width)) for page in reader.pages]


def build_png(width: int = 40, height: int = 20) -> bytes:
    buf = BytesIO()
    Image.new("RGB", (width, height), "white").save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture()
def pdf_factory() -> Callable[[int, int], bytes]:
    """PDF with `pages` pages, widths BASE_WIDTH + offset + 10 * index."""

    def _create(pages: int, offset: int = 0) -> bytes:
        return build_pdf([BASE_WIDTH + offset + 10 * i for i in range(pages)])

    return _create


@pytest.fixture()
def five_page_pdf(pdf_factory) -> bytes:
    return pdf_factory(5)


@pytest.fixture()
def pdf_record() -> Callable[..., Record]:
    def _create(data: bytes, name: str = "data", mime_type: str | None = "application/pdf") -> Record:
        return Record(payloads={name: Payload(data, mime_type, "input.pdf")})

    return _create


@pytest.fixture()
def fake_tesseract(monkeypatch):
    """Replaces pytesseract.image_to_string; records every call."""
    calls: list[dict] = []

    def _image_to_string(img, lang=None, config=""):
        calls.append({"size": img.size, "lang": lang, "config": config})
        return f"text {img.size[0]}x{img.size[1]}"

    monkeypatch.setattr("pytesseract.image_to_string", _image_to_string)
    return calls
