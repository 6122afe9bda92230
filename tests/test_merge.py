import pytest
from PyPDF2 import PdfWriter

from conftest import page_widths
from exceptions import CorruptDocument, NoInputDocuments
from services.converters.pdf.merge import merge_pdfs


def test_merge_concatenates_in_source_order(pdf_factory):
    a, b = pdf_factory(2), pdf_factory(3, offset=500)

    merged, page_count = merge_pdfs([a, b])

    assert page_count == 5
    assert page_widths(merged) == page_widths(a) + page_widths(b)


def test_merge_is_associative_on_page_order(pdf_factory):
    a, b, c = pdf_factory(1), pdf_factory(2, offset=200), pdf_factory(3, offset=400)

    ab, _ = merge_pdfs([a, b])
    ab_then_c, _ = merge_pdfs([ab, c])
    abc, _ = merge_pdfs([a, b, c])

    assert page_widths(ab_then_c) == page_widths(abc)


def test_merge_skips_dropped_inputs(pdf_factory):
    a = pdf_factory(2)

    merged, page_count = merge_pdfs([None, a, None])

    assert page_count == 2
    assert page_widths(merged) == page_widths(a)


def test_unreadable_input_fails_with_its_index(pdf_factory):
    with pytest.raises(CorruptDocument) as exc_info:
        merge_pdfs([pdf_factory(1), b"broken"])

    assert exc_info.value.item_index == 1


def test_unreadable_input_is_skipped_when_tolerant(pdf_factory):
    a = pdf_factory(2)

    merged, page_count = merge_pdfs([b"broken", a], continue_on_fail=True)

    assert page_count == 2
    assert page_widths(merged) == page_widths(a)


@pytest.mark.parametrize("sources", [[], [None, None]])
def test_nothing_to_merge(sources):
    with pytest.raises(NoInputDocuments):
        merge_pdfs(sources)


def test_only_broken_inputs_when_tolerant():
    with pytest.raises(NoInputDocuments):
        merge_pdfs([b"broken", b"also broken"], continue_on_fail=True)


def test_page_copy_failure_carries_the_input_index(monkeypatch, pdf_factory):
    sources = [pdf_factory(1), pdf_factory(2)]
    original_add_page = PdfWriter.add_page
    calls = []

    def _add_page(self, page, *args, **kwargs):
        calls.append(page)
        if len(calls) > 1:
            raise KeyError("/Contents")
        return original_add_page(self, page, *args, **kwargs)

    monkeypatch.setattr(PdfWriter, "add_page", _add_page)

    with pytest.raises(CorruptDocument) as exc_info:
        merge_pdfs(sources, continue_on_fail=True)

    assert exc_info.value.item_index == 1
