import shutil
from typing import Optional

from loguru import logger

from .base import BaseConfig


class TesseractConfig(BaseConfig):
    """Configuration class for the local Tesseract OCR provider"""

    def __init__(self, dpi: Optional[int] = None, tesseract_cmd: Optional[str] = None):
        super().__init__()
        self.tesseract_cmd = tesseract_cmd or self._get_env_var("TESSERACT_CMD", "tesseract")
        self.dpi = int(dpi or self._get_env_var("OCR_DPI", "300"))

    def validate(self) -> bool:
        """Check the tesseract binary can be found"""
        if shutil.which(self.tesseract_cmd) is None:
            logger.error(f"Error: tesseract executable not found: {self.tesseract_cmd}")
            logger.error("Install tesseract-ocr or set TESSERACT_CMD to its path")
            return False
        if self.dpi <= 0:
            logger.error(f"Error: OCR_DPI must be positive, got {self.dpi}")
            return False
        return True

    def get_model(self) -> str:
        """Tesseract has no model name; report the engine command"""
        return self.tesseract_cmd
