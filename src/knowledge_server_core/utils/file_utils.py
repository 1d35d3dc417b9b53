"""
Upload admission helpers
"""

from pathlib import PurePath
from typing import Any, Dict, List, Optional

from ..exceptions import UnsupportedFormatError
from ..ingest.detector import get_extension

CONTENT_TYPES = {
    ".pdf": "application/pdf",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".txt": "text/plain",
    ".csv": "text/csv",
}


class UploadRejected(ValueError):
    """Upload refused by the admission gate before reaching the pipeline"""


def validate_file_type(filename: str, allowed_extensions: List[str]) -> bool:
    """Check the filename extension against the configured allow-list"""
    if not filename:
        return False
    return get_extension(filename) in {ext.lower() for ext in allowed_extensions}


def validate_upload(file_content: bytes, filename: Optional[str], upload_config: Dict[str, Any]) -> str:
    """Caller-level admission gate for uploads

    Returns:
        str: The bare filename to use as the knowledge source

    Raises:
        UploadRejected: Missing filename or file too large
        UnsupportedFormatError: Extension not in ``allowed_extensions``
    """
    if not filename or not filename.strip():
        raise UploadRejected("No filename provided")

    max_bytes = int(float(upload_config.get("max_size_mb", 20)) * 1024 * 1024)
    if len(file_content) > max_bytes:
        raise UploadRejected(
            f"File too large: {len(file_content)} bytes (limit {max_bytes} bytes)"
        )

    allowed = upload_config.get("allowed_extensions") or []
    if allowed and not validate_file_type(filename, allowed):
        raise UnsupportedFormatError(f"Unsupported file type: {get_extension(filename) or filename}")

    return PurePath(filename.replace("\\", "/")).name


def detect_content_type(filename: str) -> str:
    """Guess the MIME type from the file extension"""
    return CONTENT_TYPES.get(get_extension(filename), "application/octet-stream")
