"""
Knowledge manager - ties upload ingestion, the knowledge store and question answering together
"""

from typing import Any, Dict, Optional

from loguru import logger

from ..exceptions import AnswerError, IngestionError, KnowledgeStoreError
from ..ingest.pipeline import ExtractionPipeline
from ..llm.client import GeminiClient
from ..models.document import UploadedDocument
from ..storage.base import KnowledgeStore
from ..utils.file_utils import UploadRejected, validate_upload


class KnowledgeManager:
    """Knowledge manager - ingestion pipeline, knowledge store and LLM"""

    def __init__(
        self,
        store: KnowledgeStore,
        pipeline: ExtractionPipeline,
        answerer: GeminiClient,
        upload_config: Optional[Dict[str, Any]] = None,
    ):
        self.store = store
        self.pipeline = pipeline
        self.answerer = answerer
        self.upload_config = upload_config or {}

    async def add_knowledge(self, content: Optional[str], source: Optional[str]) -> Dict[str, Any]:
        """
        Store manually typed knowledge

        Args:
            content: Knowledge text
            source: Caller-supplied label

        Returns:
            Dict with ``success``; on failure also ``error`` and ``kind``
        """
        if not content or not content.strip() or not source or not source.strip():
            return {"success": False, "kind": "InvalidRequest", "error": "Missing content or source"}

        result = await self.store.insert(content, source)
        if not result.success:
            return {"success": False, "kind": "StoreFailure", "error": result.message}

        logger.info(f"Manual knowledge added: {source} ({len(content)} characters)")
        return {"success": True}

    async def ingest_upload(self, file_data: bytes, filename: Optional[str]) -> Dict[str, Any]:
        """
        Run an uploaded file through the pipeline and store the extracted text

        Args:
            file_data: Raw file bytes
            filename: Original filename, used as the knowledge source

        Returns:
            Dict with ``success``; on success ``method`` and ``characters``,
            on failure ``kind`` and ``error``. Nothing is stored on failure.
        """
        try:
            source = validate_upload(file_data, filename, self.upload_config)
        except UploadRejected as e:
            logger.warning(f"Upload rejected: {e}")
            return {"success": False, "kind": "UploadRejected", "error": str(e)}
        except IngestionError as e:
            logger.warning(f"Upload rejected: {e.message}")
            return {"success": False, "kind": e.kind.value, "error": e.message}

        document = UploadedDocument(buffer=file_data, declared_name=source)
        outcome = await self.pipeline.run(document)

        if not outcome.ok:
            return {"success": False, "kind": outcome.kind.value, "error": outcome.message}

        result = await self.store.insert(outcome.text, source)
        if not result.success:
            return {"success": False, "kind": "StoreFailure", "error": result.message}

        logger.success(f"File indexed: {source} via {outcome.method.value}")
        return {
            "success": True,
            "source": source,
            "method": outcome.method.value,
            "characters": len(outcome.text),
        }

    async def ask(self, question: Optional[str]) -> str:
        """
        Answer a question from everything in the knowledge store

        Raises:
            ValueError: Blank question
            KnowledgeStoreError: Stored knowledge could not be read
            AnswerError: The model request failed
        """
        if not question or not question.strip():
            raise ValueError("No question provided")

        try:
            contents = await self.store.select_all()
        except KnowledgeStoreError:
            raise
        except Exception as e:
            raise KnowledgeStoreError("Failed to read knowledge", details=str(e)) from e

        try:
            return await self.answerer.answer(question, contents)
        except AnswerError:
            raise
        except Exception as e:
            logger.error(f"AI request failed: {e}")
            raise AnswerError("AI request failed", details=str(e)) from e
