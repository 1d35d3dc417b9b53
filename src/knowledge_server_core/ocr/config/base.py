import os
from abc import ABC, abstractmethod
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class BaseConfig(ABC):
    """Base configuration class for OCR providers"""

    def __init__(self):
        self._load_environment()

    def _load_environment(self):
        """Load environment variables - can be overridden by subclasses"""
        load_dotenv()

    @abstractmethod
    def validate(self) -> bool:
        """Validate the configuration"""
        pass

    def get_api_key(self) -> Optional[str]:
        """Get the API key, if the provider needs one"""
        return None

    @abstractmethod
    def get_model(self) -> str:
        """Get the model or engine name"""
        pass

    def _get_env_var(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Helper method to get environment variables"""
        return os.getenv(key, default)
