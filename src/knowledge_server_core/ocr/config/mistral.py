from typing import Optional

from loguru import logger

from .base import BaseConfig

DEFAULT_MISTRAL_MODEL = "mistral-ocr-latest"


class MistralConfig(BaseConfig):
    """Settings for the hosted Mistral OCR provider

    Explicit arguments come from the ``ocr`` section of the server config;
    ``MISTRAL_API_KEY`` and ``MISTRAL_OCR_MODEL`` fill in whatever is left out.
    """

    def __init__(self, model: Optional[str] = None, api_key: Optional[str] = None):
        super().__init__()
        self.api_key = api_key or self._get_env_var("MISTRAL_API_KEY")
        self.model = model or self._get_env_var("MISTRAL_OCR_MODEL", DEFAULT_MISTRAL_MODEL)

    def validate(self) -> bool:
        if not self.api_key:
            logger.error("Mistral OCR selected but no API key configured (ocr.api_key or MISTRAL_API_KEY)")
            return False
        return True

    def get_api_key(self) -> Optional[str]:
        return self.api_key

    def get_model(self) -> str:
        return self.model
