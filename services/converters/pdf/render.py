from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from io import BytesIO
from typing import Iterator, Sequence

from PIL import Image

from exceptions import CorruptDocument, InvalidOption, InvalidRangeSpec, RenderBackendUnavailable
from models import PageRange, RasterImage
from settings import (
    IMAGE_MIMES,
    JPEG_QUALITY,
    MAX_DPI,
    MIN_DPI,
    PDF_POINTS_PER_INCH,
    RENDER_DPI,
    logger,
)

from .pages import parse_page_range, whole_document


def _require_fitz():
    try:
        import fitz  # PyMuPDF
    except ImportError as e:
        logger.error(f"PyMuPDF import error: {e}")
        raise RenderBackendUnavailable(
            "Missing dependency: PyMuPDF is required to render PDF pages."
        ) from e
    return fitz


def check_render_backend() -> None:
    """Fails fast with RenderBackendUnavailable, before any page is touched."""
    _require_fitz()


@dataclass(frozen=True)
class RenderOptions:
    dpi: float = RENDER_DPI
    format: str = "png"
    quality: float | None = None

    def __post_init__(self) -> None:
        if self.format not in IMAGE_MIMES:
            raise InvalidOption(f'Unknown image format "{self.format}"')
        if not MIN_DPI <= self.dpi <= MAX_DPI:
            raise InvalidOption(f"DPI must be between {MIN_DPI} and {MAX_DPI}, got {self.dpi}")
        if self.quality is not None and not 0 < self.quality <= 1:
            raise InvalidOption(f"JPEG quality must be in (0, 1], got {self.quality}")

    @property
    def scale(self) -> float:
        return max(0.1, self.dpi / PDF_POINTS_PER_INCH)

    @property
    def jpeg_quality(self) -> float:
        return self.quality if self.quality is not None else JPEG_QUALITY


class PageSurface:
    """Pixel buffer of one rendered page. Unusable after release()."""

    def __init__(self, pixmap):
        self.pixmap = pixmap

    @property
    def size(self) -> tuple[int, int]:
        return max(1, self.pixmap.width), max(1, self.pixmap.height)

    def release(self) -> None:
        self.pixmap = None


@contextmanager
def page_surface(page, scale: float) -> Iterator[PageSurface]:
    fitz = _require_fitz()
    surface = PageSurface(page.get_pixmap(matrix=fitz.Matrix(scale, scale), alpha=False))
    try:
        yield surface
    finally:
        surface.release()


def encode_surface(surface: PageSurface, options: RenderOptions) -> bytes:
    pix = surface.pixmap
    if options.format == "png":
        return pix.tobytes("png")

    img = Image.frombytes("RGB", (pix.width, pix.height), pix.samples)
    buf = BytesIO()
    # Pillow takes JPEG quality on a 1..100 scale
    img.save(buf, format="JPEG", quality=max(1, round(options.jpeg_quality * 100)))
    return buf.getvalue()


def _resolve_ranges(
    ranges: str | Sequence[PageRange] | None,
    page_count: int,
) -> list[PageRange]:
    if ranges is None:
        return whole_document(page_count)

    if isinstance(ranges, str):
        parsed = parse_page_range(ranges, page_count)
        return parsed or whole_document(page_count)

    resolved = list(ranges) or whole_document(page_count)
    for page_range in resolved:
        if page_range.end > page_count:
            raise InvalidRangeSpec(
                f"Page range {page_range.start}-{page_range.end} exceeds "
                f"document length ({page_count})"
            )
    return resolved


def iter_rendered_pages(
    data: bytes,
    options: RenderOptions | None = None,
    ranges: str | Sequence[PageRange] | None = None,
) -> Iterator[RasterImage]:
    """
    Renders the requested pages one at a time, in range order.

    Each page surface is released before the next one is allocated, so at
    most one page raster is held at any point.
    """
    options = options or RenderOptions()
    fitz = _require_fitz()

    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as e:
        logger.error(f"Render PDF open error: {e}")
        raise CorruptDocument(f"Could not parse PDF: {e}") from e

    with doc:
        page_ranges = _resolve_ranges(ranges, doc.page_count)
        scale = options.scale

        for page_range in page_ranges:
            for page_number in page_range.pages():
                page = doc.load_page(page_number - 1)
                with page_surface(page, scale) as surface:
                    width, height = surface.size
                    buffer = encode_surface(surface, options)

                yield RasterImage(
                    page_number=page_number,
                    data=buffer,
                    format=options.format,
                    width=width,
                    height=height,
                    quality=options.jpeg_quality if options.format == "jpeg" else None,
                )


def render_pdf_pages(
    data: bytes,
    options: RenderOptions | None = None,
    ranges: str | Sequence[PageRange] | None = None,
) -> list[RasterImage]:
    check_render_backend()
    images = list(iter_rendered_pages(data, options, ranges))
    logger.info(f"Rendered {len(images)} page(s)")
    return images
