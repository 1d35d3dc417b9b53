import io
from typing import List

import pdfplumber
import pytesseract
from loguru import logger
from PIL import Image

from ...exceptions import RecognitionError
from ..base import DEFAULT_LANGUAGE, BaseOCRProvider
from ..config.tesseract import TesseractConfig


class TesseractOCRProvider(BaseOCRProvider):
    """Local OCR: renders each PDF page with pdfplumber and reads it with Tesseract"""

    name = "tesseract"

    def __init__(self, config: TesseractConfig = None):
        if config is None:
            config = TesseractConfig()
        super().__init__(config)
        pytesseract.pytesseract.tesseract_cmd = self.config.tesseract_cmd

    def render_page(self, page) -> Image.Image:
        """Rasterize one pdfplumber page to an RGB image"""
        return page.to_image(resolution=self.config.dpi).original.convert("RGB")

    def recognize(self, buffer: bytes, language: str = DEFAULT_LANGUAGE) -> str:
        """Render and read the buffer one page at a time"""
        if not buffer:
            return ""

        if not self.config.validate():
            raise RecognitionError("Tesseract OCR is not available")

        pages: List[str] = []
        try:
            with pdfplumber.open(io.BytesIO(buffer)) as pdf:
                logger.info(f"Running OCR on {len(pdf.pages)} pages (lang={language}, dpi={self.config.dpi})")
                for number, page in enumerate(pdf.pages, start=1):
                    pages.append(self._recognize_page(page, number, language))
        except RecognitionError:
            raise
        except Exception as e:
            raise RecognitionError("Failed to open PDF for OCR", details=str(e)) from e

        text = self._join_pages(pages)
        logger.debug(f"OCR recognized {len(text)} characters")
        return text

    def _recognize_page(self, page, number: int, language: str) -> str:
        # only one rendered page is held at a time
        try:
            image = self.render_page(page)
        except Exception as e:
            raise RecognitionError(f"Failed to render page {number} for OCR", details=str(e)) from e

        try:
            return pytesseract.image_to_string(image, lang=language)
        except Exception as e:
            raise RecognitionError(f"Tesseract failed on page {number}", details=str(e)) from e
        finally:
            image.close()
