from .base import DEFAULT_LANGUAGE, BaseOCRProvider
from .config.base import BaseConfig
from .factory import OCRProviderFactory
from .processor import OCRProcessor

__all__ = ["OCRProcessor", "OCRProviderFactory", "BaseOCRProvider", "BaseConfig", "DEFAULT_LANGUAGE"]
