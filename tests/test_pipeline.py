"""Tests for the extraction pipeline orchestrator."""

import asyncio

import pytest

from conftest import FakeOCRProvider, build_docx, build_pdf
from knowledge_server_core.exceptions import RecognitionError
from knowledge_server_core.ingest import ExtractionPipeline
from knowledge_server_core.ingest.extractors import BaseTextExtractor
from knowledge_server_core.models import (
    DocumentKind,
    ExtractionFailure,
    ExtractionMethod,
    ExtractionResult,
    FailureKind,
    UploadedDocument,
)


class CountingExtractor(BaseTextExtractor):
    """Extractor that records calls"""

    def __init__(self, kind, text="", error=None):
        self.kind = kind
        self.text = text
        self.error = error
        self.calls = 0

    def extract(self, buffer):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.text


class TestDirectText:
    """Documents with a text layer are accepted without OCR."""

    @pytest.mark.asyncio
    async def test_docx_scenario(self, pipeline, notes_docx, silent_ocr):
        outcome = await pipeline.run(UploadedDocument(notes_docx, "notes.docx"))

        assert outcome == ExtractionResult("Alloy hardness depends on...", ExtractionMethod.DIRECT_TEXT)
        assert silent_ocr.calls == 0

    @pytest.mark.asyncio
    async def test_pdf_scenario_skips_ocr(self, text_pdf):
        ocr = FakeOCRProvider(text="should never be used")
        pipeline = ExtractionPipeline(ocr=ocr)

        outcome = await pipeline.run(UploadedDocument(text_pdf, "doc.pdf"))

        assert outcome.ok
        assert outcome.text == "Phase diagrams show..."
        assert outcome.method is ExtractionMethod.DIRECT_TEXT
        assert ocr.calls == 0

    @pytest.mark.asyncio
    async def test_declared_extension_case_does_not_matter(self, pipeline, text_pdf):
        outcome = await pipeline.extract_bytes(text_pdf, "DOC.PDF")
        assert outcome.method is ExtractionMethod.DIRECT_TEXT


class TestOcrFallback:
    """PDFs without a text layer go through OCR."""

    @pytest.mark.asyncio
    async def test_scanned_pdf_scenario(self, scanned_pdf, quenching_ocr):
        pipeline = ExtractionPipeline(ocr=quenching_ocr)

        outcome = await pipeline.run(UploadedDocument(scanned_pdf, "scan.pdf"))

        assert outcome == ExtractionResult("Quenching", ExtractionMethod.OCR)
        assert quenching_ocr.calls == 1

    @pytest.mark.asyncio
    async def test_ocr_receives_configured_language(self, scanned_pdf, quenching_ocr):
        pipeline = ExtractionPipeline(ocr=quenching_ocr, language="deu")
        await pipeline.run(UploadedDocument(scanned_pdf, "scan.pdf"))
        assert quenching_ocr.languages == ["deu"]

    @pytest.mark.asyncio
    async def test_blank_pdf_is_no_recoverable_text(self, pipeline, blank_pdf, silent_ocr):
        outcome = await pipeline.run(UploadedDocument(blank_pdf, "blank.pdf"))

        assert isinstance(outcome, ExtractionFailure)
        assert outcome.kind is FailureKind.NO_RECOVERABLE_TEXT
        assert silent_ocr.calls == 1

    @pytest.mark.asyncio
    async def test_whitespace_only_ocr_text_counts_as_empty(self, blank_pdf):
        pipeline = ExtractionPipeline(ocr=FakeOCRProvider(text=" \n\t "))
        outcome = await pipeline.run(UploadedDocument(blank_pdf, "blank.pdf"))
        assert outcome.kind is FailureKind.NO_RECOVERABLE_TEXT

    @pytest.mark.asyncio
    async def test_empty_buffer_scenario(self, pipeline):
        outcome = await pipeline.run(UploadedDocument(b"", "empty.pdf"))

        assert not outcome.ok
        assert outcome.kind is FailureKind.NO_RECOVERABLE_TEXT

    @pytest.mark.asyncio
    async def test_recognition_error_is_recognition_failure(self, scanned_pdf):
        ocr = FakeOCRProvider(error=RecognitionError("tesseract missing"))
        outcome = await ExtractionPipeline(ocr=ocr).run(UploadedDocument(scanned_pdf, "scan.pdf"))

        assert outcome.kind is FailureKind.RECOGNITION_FAILURE
        assert outcome.message == "tesseract missing"

    @pytest.mark.asyncio
    async def test_unexpected_ocr_exception_is_recognition_failure(self, scanned_pdf):
        ocr = FakeOCRProvider(error=OSError("engine crashed"))
        outcome = await ExtractionPipeline(ocr=ocr).run(UploadedDocument(scanned_pdf, "scan.pdf"))

        assert outcome.kind is FailureKind.RECOGNITION_FAILURE
        assert "engine crashed" in outcome.details


class TestFailures:
    """Terminal failures of one ingestion call."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["data.csv", "notes.txt", "README"])
    async def test_unsupported_format_before_any_extractor(self, name, text_pdf, silent_ocr):
        pdf = CountingExtractor(DocumentKind.PDF, text="x")
        docx = CountingExtractor(DocumentKind.DOCX, text="x")
        pipeline = ExtractionPipeline(
            ocr=silent_ocr,
            extractors={DocumentKind.PDF: pdf, DocumentKind.DOCX: docx},
        )

        outcome = await pipeline.run(UploadedDocument(text_pdf, name))

        assert outcome.kind is FailureKind.UNSUPPORTED_FORMAT
        assert pdf.calls == docx.calls == silent_ocr.calls == 0

    @pytest.mark.asyncio
    async def test_kind_without_extractor_is_unsupported(self, notes_docx, silent_ocr):
        pipeline = ExtractionPipeline(
            ocr=silent_ocr,
            extractors={DocumentKind.PDF: CountingExtractor(DocumentKind.PDF)},
        )
        outcome = await pipeline.run(UploadedDocument(notes_docx, "notes.docx"))
        assert outcome.kind is FailureKind.UNSUPPORTED_FORMAT

    @pytest.mark.asyncio
    async def test_empty_docx_is_empty_document_without_ocr(self, pipeline, empty_docx, silent_ocr):
        outcome = await pipeline.run(UploadedDocument(empty_docx, "empty.docx"))

        assert outcome.kind is FailureKind.EMPTY_DOCUMENT
        assert silent_ocr.calls == 0

    @pytest.mark.asyncio
    async def test_whitespace_docx_is_empty_document(self, pipeline):
        data = build_docx(["   ", "\t"])
        outcome = await pipeline.run(UploadedDocument(data, "blank.docx"))
        assert outcome.kind is FailureKind.EMPTY_DOCUMENT

    @pytest.mark.asyncio
    async def test_corrupt_docx_is_malformed(self, pipeline):
        outcome = await pipeline.run(UploadedDocument(b"not a zip archive", "broken.docx"))
        assert outcome.kind is FailureKind.MALFORMED_DOCUMENT

    @pytest.mark.asyncio
    async def test_corrupt_pdf_is_malformed_and_skips_ocr(self, pipeline, silent_ocr):
        outcome = await pipeline.run(UploadedDocument(b"garbage bytes", "broken.pdf"))

        assert outcome.kind is FailureKind.MALFORMED_DOCUMENT
        assert silent_ocr.calls == 0

    @pytest.mark.asyncio
    async def test_unexpected_extractor_exception_is_malformed(self, silent_ocr):
        broken = CountingExtractor(DocumentKind.PDF, error=KeyError("/Root"))
        pipeline = ExtractionPipeline(ocr=silent_ocr, extractors={DocumentKind.PDF: broken})

        outcome = await pipeline.run(UploadedDocument(b"%PDF", "doc.pdf"))

        assert outcome.kind is FailureKind.MALFORMED_DOCUMENT
        assert broken.calls == 1

    @pytest.mark.asyncio
    async def test_blank_pdf_never_reports_empty_document(self, blank_pdf):
        """EmptyDocument is reserved for DOCX."""
        for ocr in (FakeOCRProvider(text=""), FakeOCRProvider(text="   ")):
            outcome = await ExtractionPipeline(ocr=ocr).run(UploadedDocument(blank_pdf, "blank.pdf"))
            assert outcome.kind is not FailureKind.EMPTY_DOCUMENT


class TestIsolation:
    """Calls share no state."""

    @pytest.mark.asyncio
    async def test_same_buffer_gives_same_result(self, pipeline, text_pdf):
        first = await pipeline.run(UploadedDocument(text_pdf, "doc.pdf"))
        second = await pipeline.run(UploadedDocument(text_pdf, "doc.pdf"))
        assert first == second

    @pytest.mark.asyncio
    async def test_concurrent_calls_are_independent(self, notes_docx, scanned_pdf):
        ocr = FakeOCRProvider(text="Quenching")
        pipeline = ExtractionPipeline(ocr=ocr)

        results = await asyncio.gather(
            pipeline.run(UploadedDocument(notes_docx, "notes.docx")),
            pipeline.run(UploadedDocument(scanned_pdf, "scan.pdf")),
            pipeline.run(UploadedDocument(b"", "data.csv")),
            pipeline.run(UploadedDocument(build_pdf(["Phase diagrams show..."]), "doc.pdf")),
        )

        assert [r.ok for r in results] == [True, True, False, True]
        assert results[0].method is ExtractionMethod.DIRECT_TEXT
        assert results[1] == ExtractionResult("Quenching", ExtractionMethod.OCR)
        assert results[2].kind is FailureKind.UNSUPPORTED_FORMAT
        assert results[3].text == "Phase diagrams show..."
        assert ocr.calls == 1


class TestResultTypes:
    """Result and failure values."""

    def test_result_rejects_blank_text(self):
        with pytest.raises(ValueError):
            ExtractionResult("   ", ExtractionMethod.DIRECT_TEXT)

    def test_declared_size_defaults_to_buffer_length(self):
        assert UploadedDocument(b"abc", "a.pdf").declared_size == 3
