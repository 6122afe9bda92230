from io import BytesIO
from typing import Iterable, Sequence

import pytesseract
from PIL import Image

from exceptions import RecognitionFailure
from models import OcrResult, PageRange
from settings import OCR_DPI, OCR_LANG, TESSDATA_DIR, logger

from .render import RenderOptions, check_render_backend, iter_rendered_pages


def _tesseract_config(lang_path: str | None) -> str:
    if not lang_path:
        return ""
    return f'--tessdata-dir "{lang_path}"'


def recognize_image(data: bytes, lang: str = OCR_LANG, lang_path: str | None = TESSDATA_DIR) -> str:
    """OCR of a single PNG/JPEG/TIFF/... buffer."""
    with Image.open(BytesIO(data)) as img:
        return pytesseract.image_to_string(
            img,
            lang=lang,
            config=_tesseract_config(lang_path),
        )


def recognize_images(
    images: Iterable[tuple[bytes, int]],
    lang: str = OCR_LANG,
    lang_path: str | None = TESSDATA_DIR,
) -> list[OcrResult]:
    """
    Runs OCR over (image bytes, page number) pairs.

    Images are recognized one after another, in the order given; a
    recognition pass finishes before the next image is decoded. The first
    failure aborts the batch with RecognitionFailure.
    """
    results: list[OcrResult] = []

    for index, (data, page_number) in enumerate(images):
        try:
            text = recognize_image(data, lang=lang, lang_path=lang_path)
        except Exception as e:
            logger.error(f"OCR processing error on page {page_number}: {e}")
            raise RecognitionFailure(
                f"OCR failed for page {page_number}: {e}",
                page_number=page_number,
            ) from e

        results.append(OcrResult(page_number=page_number, text=text))
        logger.debug(f"OCR page {page_number} ({index + 1}): {len(text)} chars")

    return results


def ocr_pdf(
    data: bytes,
    lang: str = OCR_LANG,
    lang_path: str | None = TESSDATA_DIR,
    options: RenderOptions | None = None,
    ranges: str | Sequence[PageRange] | None = None,
) -> list[OcrResult]:
    """Rasterizes the requested PDF pages and recognizes each of them."""
    check_render_backend()
    options = options or RenderOptions(dpi=OCR_DPI, format="png")

    pages = ((img.data, img.page_number) for img in iter_rendered_pages(data, options, ranges))
    results = recognize_images(pages, lang=lang, lang_path=lang_path)

    logger.info(f"OCR done for {len(results)} page(s), lang={lang}")
    return results


def combine_page_texts(results: Iterable[OcrResult]) -> str:
    """'--- Page N ---' block per page, ascending page number."""
    ordered = sorted(results, key=lambda r: r.page_number)
    return "\n\n".join(f"--- Page {r.page_number} ---\n{r.text}" for r in ordered)
