# handlers/images.py
from typing import Any, Mapping, Sequence

from models import Payload, Record
from pdf_services import RenderOptions, check_render_backend, render_pdf_pages
from settings import IMAGE_MIMES, RENDER_DPI
from utils import get_payload, input_payload_name, require_single_item


def render_options_from(params: Mapping[str, Any], default_dpi: float = RENDER_DPI) -> RenderOptions:
    fmt = params.get("format") or "png"
    dpi = params.get("dpi")
    # quality only matters for JPEG
    quality = params.get("jpegQuality") if fmt == "jpeg" else None
    return RenderOptions(
        dpi=default_dpi if dpi is None else dpi,
        format=fmt,
        quality=quality,
    )


def handle_to_image(
    items: Sequence[Record],
    params: Mapping[str, Any],
    continue_on_fail: bool = False,
) -> list[Record]:
    item = require_single_item(items, "toImage")
    payload = get_payload(item, input_payload_name(params))
    options = render_options_from(params)

    check_render_backend()
    images = render_pdf_pages(
        payload.data,
        options,
        ranges=params.get("pageRangesSpec") or "1-",
    )

    mime_type = IMAGE_MIMES[options.format]
    return [
        Record(
            metadata={"pageNumber": img.page_number},
            payloads={"image": Payload(img.data, mime_type, img.file_name)},
        )
        for img in images
    ]
