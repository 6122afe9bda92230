# pdf_services.py: flat facade over services.converters
from services.converters.pdf import (
    parse_page_range,
    load_pdf,
    extract_pages,
    serialize_pdf,
    merge_pdfs,
    split_pdf,
    split_pdf_to_pages,
    part_file_name,
    RenderOptions,
    check_render_backend,
    render_pdf_pages,
    recognize_images,
    ocr_pdf,
    combine_page_texts,
)

__all__ = [
    "parse_page_range",
    "load_pdf",
    "extract_pages",
    "serialize_pdf",
    "merge_pdfs",
    "split_pdf",
    "split_pdf_to_pages",
    "part_file_name",
    "RenderOptions",
    "check_render_backend",
    "render_pdf_pages",
    "recognize_images",
    "ocr_pdf",
    "combine_page_texts",
]
