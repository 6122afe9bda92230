from .pages import parse_page_range, every_page, whole_document
from .document import PdfDocument, load_pdf, extract_pages, serialize_pdf
from .merge import merge_pdfs
from .split import split_pdf, split_pdf_to_pages, part_file_name
from .render import RenderOptions, check_render_backend, iter_rendered_pages, render_pdf_pages
from .ocr import recognize_image, recognize_images, ocr_pdf, combine_page_texts

__all__ = [
    "parse_page_range",
    "every_page",
    "whole_document",
    "PdfDocument",
    "load_pdf",
    "extract_pages",
    "serialize_pdf",
    "merge_pdfs",
    "split_pdf",
    "split_pdf_to_pages",
    "part_file_name",
    "RenderOptions",
    "check_render_backend",
    "iter_rendered_pages",
    "render_pdf_pages",
    "recognize_image",
    "recognize_images",
    "ocr_pdf",
    "combine_page_texts",
]
