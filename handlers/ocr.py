# handlers/ocr.py
from typing import Any, Mapping, Sequence

from exceptions import InvalidOption
from models import Payload, Record
from pdf_services import check_render_backend, combine_page_texts, ocr_pdf, recognize_images
from settings import OCR_DPI, OCR_LANG, TEXT_MIME, TESSDATA_DIR, logger
from utils import get_payload, input_payload_name, is_pdf_payload, require_single_item

from .images import render_options_from

RETURN_MODES = ("single", "perPage")


def _text_payload(text: str, file_name: str) -> Payload:
    return Payload(text.encode("utf-8"), TEXT_MIME, file_name)


def handle_ocr(
    items: Sequence[Record],
    params: Mapping[str, Any],
    continue_on_fail: bool = False,
) -> list[Record]:
    item = require_single_item(items, "ocr")

    lang = params.get("language") or OCR_LANG
    return_mode = params.get("returnMode") or "single"
    attach_txt = bool(params.get("attachTextPayload", False))
    advanced = bool(params.get("advanced", False))

    if return_mode not in RETURN_MODES:
        raise InvalidOption(f'Unknown OCR return mode "{return_mode}"')

    payload = get_payload(item, input_payload_name(params))

    # Rasterization defaults, overridable in advanced mode
    page_ranges = "1-"
    options = render_options_from({}, default_dpi=OCR_DPI)
    lang_path = TESSDATA_DIR
    if advanced:
        page_ranges = params.get("pageRangesSpec") or "1-"
        options = render_options_from(params, default_dpi=OCR_DPI)
        lang_path = params.get("languageDataPath") or TESSDATA_DIR

    if is_pdf_payload(payload):
        check_render_backend()
        results = ocr_pdf(
            payload.data,
            lang=lang,
            lang_path=lang_path,
            options=options,
            ranges=page_ranges,
        )
    else:
        logger.info("OCR input is not a PDF, treating it as a single image")
        results = recognize_images([(payload.data, 1)], lang=lang, lang_path=lang_path)

    if return_mode == "perPage":
        outputs: list[Record] = []
        for res in results:
            out = Record(metadata={"pageNumber": res.page_number, "text": res.text})
            if attach_txt:
                out.payloads["text"] = _text_payload(res.text, f"page-{res.page_number}.txt")
            outputs.append(out)
        return outputs

    combined = combine_page_texts(results)
    out = Record(metadata={"text": combined})
    if attach_txt:
        out.payloads["text"] = _text_payload(combined, "ocr.txt")
    return [out]
