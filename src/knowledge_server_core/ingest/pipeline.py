"""Extraction pipeline orchestrator.

One call moves a single upload through:

    Received -> Detected -> PrimaryExtracted -> (OcrExtracted) -> Validated -> Done | Failed

1. The declared filename is classified; unsupported kinds are rejected before
   any extractor runs.
2. The extractor registered for the kind pulls the text layer.
3. DOCX without text fails as EmptyDocument, OCR is never tried for DOCX.
4. PDF without a text layer goes to OCR; nothing recognized fails as
   NoRecoverableText.
5. PDF with a text layer is accepted directly and OCR is skipped.

The pipeline keeps no per-call state on the instance, so one pipeline can serve
concurrent calls.
"""

from typing import Dict, Mapping, Optional

from loguru import logger

from ..exceptions import (
    EmptyDocumentError,
    IngestionError,
    MalformedDocumentError,
    NoRecoverableTextError,
    RecognitionError,
    UnsupportedFormatError,
)
from ..models.document import DocumentKind, UploadedDocument
from ..models.processing import (
    ExtractionFailure,
    ExtractionMethod,
    ExtractionOutcome,
    ExtractionResult,
    FailureKind,
    PipelineState,
)
from ..ocr.base import DEFAULT_LANGUAGE
from .detector import detect
from .extractors import BaseTextExtractor, DocxTextExtractor, PdfTextExtractor


def default_extractors() -> Dict[DocumentKind, BaseTextExtractor]:
    """Kind -> extractor mapping used when none is injected"""
    return {
        DocumentKind.PDF: PdfTextExtractor(),
        DocumentKind.DOCX: DocxTextExtractor(),
    }


class ExtractionPipeline:
    """Turns an uploaded document into a validated text artifact or a typed failure.

    Example:
        pipeline = ExtractionPipeline(ocr=OCRProcessor("tesseract"))
        outcome = await pipeline.run(UploadedDocument(data, "notes.docx"))
        if outcome.ok:
            await store.insert(outcome.text, "notes.docx")
    """

    def __init__(
        self,
        ocr,
        extractors: Optional[Mapping[DocumentKind, BaseTextExtractor]] = None,
        language: str = DEFAULT_LANGUAGE,
    ):
        """Initialize the pipeline.

        Args:
            ocr: OCR collaborator exposing ``arecognize(buffer, language)``,
                e.g. an OCRProcessor or any BaseOCRProvider.
            extractors: Optional kind -> extractor mapping. Defaults to the
                pdfplumber and python-docx extractors.
            language: Language passed to OCR.
        """
        self.ocr = ocr
        self.extractors: Dict[DocumentKind, BaseTextExtractor] = (
            dict(extractors) if extractors is not None else default_extractors()
        )
        self.language = language

    async def run(self, document: UploadedDocument) -> ExtractionOutcome:
        """Run one ingestion call.

        Returns:
            ExtractionResult on success, ExtractionFailure otherwise. Never raises
            for content or tooling problems.
        """
        logger.debug(f"[{document.declared_name}] {PipelineState.RECEIVED.value} ({document.declared_size} bytes)")
        try:
            result = await self._run(document)
        except IngestionError as e:
            return self._fail(document, e)

        logger.info(
            f"[{document.declared_name}] {PipelineState.DONE.value}: "
            f"{len(result.text)} characters via {result.method.value}"
        )
        return result

    async def extract_bytes(self, buffer: bytes, declared_name: str) -> ExtractionOutcome:
        """Convenience wrapper building the UploadedDocument for the caller"""
        return await self.run(UploadedDocument(buffer=buffer, declared_name=declared_name))

    async def _run(self, document: UploadedDocument) -> ExtractionResult:
        name = document.declared_name

        kind = detect(name)
        if kind is DocumentKind.UNSUPPORTED:
            raise UnsupportedFormatError(f"Unsupported file type: {name}")
        extractor = self.extractors.get(kind)
        if extractor is None:
            raise UnsupportedFormatError(f"No extractor registered for {kind.value} documents")
        logger.debug(f"[{name}] {PipelineState.DETECTED.value} as {kind.value}")

        text = await self._extract(extractor, document.buffer)
        logger.debug(f"[{name}] {PipelineState.PRIMARY_EXTRACTED.value}: {len(text)} characters")

        if text:
            method = ExtractionMethod.DIRECT_TEXT
        elif kind is DocumentKind.DOCX:
            raise EmptyDocumentError(f"No text extracted from {name}")
        else:
            logger.info(f"[{name}] no text layer found, falling back to OCR")
            text = await self._recognize(document.buffer)
            logger.debug(f"[{name}] {PipelineState.OCR_EXTRACTED.value}: {len(text)} characters")
            if not text:
                raise NoRecoverableTextError(f"No text recovered from {name}, even with OCR")
            method = ExtractionMethod.OCR

        logger.debug(f"[{name}] {PipelineState.VALIDATED.value}")
        return ExtractionResult(text=text, method=method)

    async def _extract(self, extractor: BaseTextExtractor, buffer: bytes) -> str:
        try:
            text = await extractor.aextract(buffer)
        except IngestionError:
            raise
        except Exception as e:
            raise MalformedDocumentError("Failed to parse document", details=str(e)) from e
        return (text or "").strip()

    async def _recognize(self, buffer: bytes) -> str:
        try:
            text = await self.ocr.arecognize(buffer, self.language)
        except IngestionError:
            raise
        except Exception as e:
            raise RecognitionError("OCR engine failed", details=str(e)) from e
        return (text or "").strip()

    def _fail(self, document: UploadedDocument, error: IngestionError) -> ExtractionFailure:
        detail = f" ({error.details})" if error.details else ""
        message = f"[{document.declared_name}] {PipelineState.FAILED.value} with {error.kind.value}: {error.message}{detail}"
        if error.kind is FailureKind.RECOGNITION_FAILURE:
            logger.error(message)
        else:
            logger.warning(message)
        return ExtractionFailure(kind=error.kind, message=error.message, details=error.details)
