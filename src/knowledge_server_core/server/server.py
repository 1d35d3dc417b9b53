"""
Knowledge server - main service class wiring every component together
"""

from typing import Any, Dict, Optional

from loguru import logger

from ..ingest.pipeline import ExtractionPipeline
from ..llm.client import GeminiClient
from ..ocr import OCRProcessor
from ..ocr.config.mistral import MistralConfig
from ..ocr.config.tesseract import TesseractConfig
from ..storage import KnowledgeStore, create_knowledge_store
from ..utils.config_utils import read_config
from .knowledge_manager import KnowledgeManager


class KnowledgeServer:
    """Knowledge server main class"""

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        config_path: Optional[str] = None,
        store: Optional[KnowledgeStore] = None,
        ocr=None,
        answerer: Optional[GeminiClient] = None,
    ):
        """
        Initialize the knowledge server

        Args:
            config: Already loaded configuration; read from ``config_path`` when omitted
            config_path: Path to a YAML config file
            store: Knowledge store to use instead of the configured one
            ocr: OCR collaborator to use instead of the configured provider
            answerer: LLM client to use instead of the configured one
        """
        self.config = config if config is not None else read_config(config_path)

        ocr_config = self.config.get("ocr", {})
        self.store = store or create_knowledge_store(self.config.get("database", {}))
        self.ocr = ocr or self._create_ocr(ocr_config)
        self.pipeline = ExtractionPipeline(
            ocr=self.ocr,
            language=ocr_config.get("language", "eng"),
        )
        self.answerer = answerer or GeminiClient(self.config.get("llm", {}))

        self.knowledge_manager = KnowledgeManager(
            self.store,
            self.pipeline,
            self.answerer,
            self.config.get("upload", {}),
        )

        self._initialized = False

    def _create_ocr(self, ocr_config: Dict[str, Any]) -> OCRProcessor:
        provider = ocr_config.get("provider", "tesseract")
        provider_config = None
        if provider == "tesseract":
            provider_config = TesseractConfig(dpi=ocr_config.get("dpi"))
        elif provider == "mistral":
            provider_config = MistralConfig(
                model=ocr_config.get("model"),
                api_key=ocr_config.get("api_key"),
            )
        return OCRProcessor(
            provider_name=provider,
            config=provider_config,
            language=ocr_config.get("language", "eng"),
        )

    async def initialize(self) -> None:
        """Initialize the server"""
        if self._initialized:
            logger.warning("Knowledge server already initialized")
            return

        try:
            logger.info("Initializing knowledge server...")
            await self.store.initialize()
            self._initialized = True
            logger.info("Knowledge server initialized")
        except Exception as e:
            logger.error(f"Knowledge server initialization failed: {e}")
            raise

    async def close(self) -> None:
        """Shut the server down"""
        if not self._initialized:
            return

        try:
            logger.info("Closing knowledge server...")
            await self.store.close()
            self._initialized = False
            logger.info("Knowledge server closed")
        except Exception as e:
            logger.error(f"Error while closing knowledge server: {e}")

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _check_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError("Knowledge server is not initialized, call initialize() first")

    async def add_knowledge(self, content: Optional[str], source: Optional[str]) -> Dict[str, Any]:
        """Store manually typed knowledge"""
        self._check_initialized()
        return await self.knowledge_manager.add_knowledge(content, source)

    async def upload_file(self, file_data: bytes, filename: Optional[str]) -> Dict[str, Any]:
        """Extract an uploaded file and store its text"""
        self._check_initialized()
        return await self.knowledge_manager.ingest_upload(file_data, filename)

    async def ask(self, question: Optional[str]) -> str:
        """Answer a question from the stored knowledge"""
        self._check_initialized()
        return await self.knowledge_manager.ask(question)

    def health_check(self) -> Dict[str, Any]:
        """Component status overview"""
        return {
            "status": "ok" if self._initialized else "starting",
            "components": {
                "store": type(self.store).__name__,
                "ocr": getattr(self.ocr, "provider_name", type(self.ocr).__name__),
                "llm": self.answerer.model,
            },
        }
