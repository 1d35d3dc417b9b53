from .mistral import MistralOCRProvider
from .tesseract import TesseractOCRProvider

__all__ = ["MistralOCRProvider", "TesseractOCRProvider"]
