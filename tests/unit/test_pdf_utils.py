import base64
import io

import pytest
from pathlib import Path
from PIL import Image
from unittest.mock import patch

from pdfrenamer.errors import DocumentOpenError, PageRenderError
from pdfrenamer.pdf_utils import PageRange, PDFConverter, PDFDocument


@pytest.mark.parametrize("spec", ["1", "3", "42", "0"])
def test_page_range_single_number_selects_first_page(spec):
    # Historical behaviour: the number itself is not used.
    assert PageRange.parse(spec) == PageRange(0, 0)


def test_page_range_pair_uses_first_number_for_both_bounds():
    page_range = PageRange.parse("2-5")
    assert page_range.start == 2
    assert page_range.end == 2


def test_page_range_unparseable_numbers_default_to_zero():
    assert PageRange.parse("a-b") == PageRange(0, 0)
    assert PageRange.parse("-3") == PageRange(0, 0)
    assert PageRange.parse("1-2-3") == PageRange(0, 0)
    assert PageRange.parse("") == PageRange(0, 0)


def test_page_range_contains():
    page_range = PageRange(1, 2)
    assert 0 not in page_range
    assert 1 in page_range
    assert 2 in page_range
    assert 3 not in page_range


def test_image_to_base64_is_jpeg():
    image = Image.new("RGBA", (10, 10), (255, 0, 0, 255))
    encoded = PDFConverter.image_to_base64(image)

    decoded = Image.open(io.BytesIO(base64.b64decode(encoded)))
    assert decoded.format == "JPEG"
    assert decoded.size == (10, 10)


@patch("pdfrenamer.pdf_utils.convert_from_path")
@patch("pdfrenamer.pdf_utils.pdfinfo_from_path")
def test_document_renders_single_page(mock_info, mock_convert):
    mock_info.return_value = {"Pages": 3}
    page = Image.new("RGB", (5, 5))
    mock_convert.return_value = [page]

    with PDFDocument(Path("doc.pdf"), dpi=72) as doc:
        assert doc.page_count == 3
        assert doc.render_page(1) is page

    assert doc.closed
    _, kwargs = mock_convert.call_args
    assert kwargs["first_page"] == 2
    assert kwargs["last_page"] == 2
    assert kwargs["dpi"] == 72


@patch("pdfrenamer.pdf_utils.pdfinfo_from_path")
def test_document_open_failure(mock_info):
    mock_info.side_effect = RuntimeError("not a pdf")

    with pytest.raises(DocumentOpenError, match="failed to open PDF"):
        PDFDocument(Path("broken.pdf"))


@patch("pdfrenamer.pdf_utils.convert_from_path")
@patch("pdfrenamer.pdf_utils.pdfinfo_from_path")
def test_document_render_failure_names_page(mock_info, mock_convert):
    mock_info.return_value = {"Pages": 2}
    mock_convert.side_effect = RuntimeError("poppler crashed")

    with PDFDocument(Path("doc.pdf")) as doc:
        with pytest.raises(PageRenderError, match="page #1") as e:
            doc.render_page(1)

    assert e.value.page == 1


@pytest.mark.parametrize("start, end", [(3, 1), (-1, 0)])
def test_page_range_rejects_invalid_bounds(start, end):
    with pytest.raises(ValueError, match="invalid page range"):
        PageRange(start, end)
