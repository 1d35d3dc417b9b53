"""
Utilities - configuration, logging and upload helpers
"""

from .config_utils import read_config
from .file_utils import UploadRejected, detect_content_type, validate_upload
from .log_utils import setup_logging

__all__ = ["read_config", "setup_logging", "validate_upload", "detect_content_type", "UploadRejected"]
