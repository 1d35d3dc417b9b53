from typing import List, Optional

from .base import DEFAULT_LANGUAGE, BaseOCRProvider
from .factory import DEFAULT_PROVIDER, OCRProviderFactory


class OCRProcessor:
    """Main OCR processor that provides a unified interface for all OCR providers"""

    def __init__(
        self,
        provider_name: str = DEFAULT_PROVIDER,
        config=None,
        language: str = DEFAULT_LANGUAGE,
    ):
        """Initialize OCR processor with specified provider

        Args:
            provider_name: Name of the OCR provider to use
            config: Optional configuration for the provider
            language: Default recognition language (tesseract code, e.g. 'eng')
        """
        self.provider_name = provider_name
        self.language = language
        self.provider: BaseOCRProvider = OCRProviderFactory.create_provider(provider_name, config)

    def recognize(self, buffer: bytes, language: Optional[str] = None) -> str:
        """Recognize the text of a PDF buffer

        Args:
            buffer: Raw PDF bytes
            language: Recognition language, defaults to the processor language

        Returns:
            str: Trimmed recognized text, empty when nothing was found
        """
        return self.provider.recognize(buffer, language or self.language)

    def get_supported_providers(self) -> List[str]:
        """Get list of supported OCR providers"""
        return OCRProviderFactory.get_supported_providers()

    def switch_provider(self, provider_name: str, config=None):
        """Switch to a different OCR provider

        Args:
            provider_name: Name of the new provider
            config: Optional configuration for the new provider
        """
        self.provider_name = provider_name
        self.provider = OCRProviderFactory.create_provider(provider_name, config)

    # --------------------
    # Async counterparts
    # --------------------
    async def arecognize(self, buffer: bytes, language: Optional[str] = None) -> str:
        """Async: recognize the text of a PDF buffer."""
        return await self.provider.arecognize(buffer, language or self.language)
