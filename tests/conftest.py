"""Pytest fixtures for knowledge server tests."""

import io
from typing import List, Optional

import docx
import pytest

from knowledge_server_core.ingest import ExtractionPipeline
from knowledge_server_core.ocr.base import BaseOCRProvider
from knowledge_server_core.storage import InMemoryKnowledgeStore


def _escape_pdf_text(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(pages: List[Optional[str]], with_image: bool = False) -> bytes:
    """Assemble a small PDF.

    Each entry of ``pages`` is the text drawn on that page, or None for a page
    without a text layer. ``with_image`` paints a grey image on text-less pages,
    the way a scanned page looks.
    """
    objects: List[bytes] = []

    def add(body: bytes) -> int:
        objects.append(body)
        return len(objects)

    catalog = add(b"")  # filled once the page tree exists
    pages_obj = add(b"")
    font = add(b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>")
    image = add(
        b"<< /Type /XObject /Subtype /Image /Width 2 /Height 2 /ColorSpace /DeviceGray "
        b"/BitsPerComponent 8 /Length 4 >>\nstream\n\x80\x80\x80\x80\nendstream"
    )

    page_ids = []
    for text in pages:
        if text is not None:
            content = f"BT /F1 18 Tf 72 720 Td ({_escape_pdf_text(text)}) Tj ET".encode("latin-1")
        elif with_image:
            content = b"q 300 0 0 200 72 500 cm /Im0 Do Q"
        else:
            content = b""
        stream = add(b"<< /Length %d >>\nstream\n" % len(content) + content + b"\nendstream")
        page_ids.append(add(
            b"<< /Type /Page /Parent %d 0 R /MediaBox [0 0 612 792] "
            b"/Resources << /Font << /F1 %d 0 R >> /XObject << /Im0 %d 0 R >> >> "
            b"/Contents %d 0 R >>" % (pages_obj, font, image, stream)
        ))

    objects[catalog - 1] = b"<< /Type /Catalog /Pages %d 0 R >>" % pages_obj
    kids = b" ".join(b"%d 0 R" % pid for pid in page_ids)
    objects[pages_obj - 1] = b"<< /Type /Pages /Kids [%s] /Count %d >>" % (kids, len(page_ids))

    out = io.BytesIO()
    out.write(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(out.tell())
        out.write(b"%d 0 obj\n" % number + body + b"\nendobj\n")
    xref_at = out.tell()
    out.write(b"xref\n0 %d\n" % (len(objects) + 1))
    out.write(b"0000000000 65535 f \n")
    for offset in offsets:
        out.write(b"%010d 00000 n \n" % offset)
    out.write(b"trailer\n<< /Size %d /Root %d 0 R >>\n" % (len(objects) + 1, catalog))
    out.write(b"startxref\n%d\n%%%%EOF\n" % xref_at)
    return out.getvalue()


def build_docx(paragraphs: List[str]) -> bytes:
    """Write a Word document with the given paragraphs"""
    document = docx.Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    out = io.BytesIO()
    document.save(out)
    return out.getvalue()


class FakeOCRProvider(BaseOCRProvider):
    """OCR stand-in that counts calls and returns a fixed text or raises"""

    name = "fake"

    def __init__(self, config=None, text: str = "", error: Optional[Exception] = None):
        super().__init__(config)
        self.text = text
        self.error = error
        self.calls = 0
        self.languages: List[str] = []

    def recognize(self, buffer: bytes, language: str = "eng") -> str:
        self.calls += 1
        self.languages.append(language)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def text_pdf() -> bytes:
    return build_pdf(["Phase diagrams show..."])


@pytest.fixture
def scanned_pdf() -> bytes:
    return build_pdf([None], with_image=True)


@pytest.fixture
def blank_pdf() -> bytes:
    return build_pdf([None])


@pytest.fixture
def notes_docx() -> bytes:
    return build_docx(["Alloy hardness depends on..."])


@pytest.fixture
def empty_docx() -> bytes:
    return build_docx([])


@pytest.fixture
def silent_ocr() -> FakeOCRProvider:
    """OCR that recognizes nothing"""
    return FakeOCRProvider(text="")


@pytest.fixture
def quenching_ocr() -> FakeOCRProvider:
    """OCR that reads the word on a scanned page"""
    return FakeOCRProvider(text="  Quenching\n")


@pytest.fixture
def pipeline(silent_ocr) -> ExtractionPipeline:
    return ExtractionPipeline(ocr=silent_ocr)


@pytest.fixture
def store() -> InMemoryKnowledgeStore:
    return InMemoryKnowledgeStore()
