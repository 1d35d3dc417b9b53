from .base import BaseConfig
from .mistral import MistralConfig
from .tesseract import TesseractConfig

__all__ = ["BaseConfig", "MistralConfig", "TesseractConfig"]
