"""
Format detection from the declared filename.

Only the extension is trusted; buffer contents are never inspected.
"""

from pathlib import PurePath
from typing import Dict, Optional

from ..models.document import DocumentKind

EXTENSION_KINDS: Dict[str, DocumentKind] = {
    ".pdf": DocumentKind.PDF,
    ".docx": DocumentKind.DOCX,
}


def get_extension(declared_name: Optional[str]) -> str:
    """Lower-cased extension of a filename including the dot, or ''"""
    if not declared_name:
        return ""
    return PurePath(declared_name.strip()).suffix.lower()


def detect(declared_name: Optional[str]) -> DocumentKind:
    """Classify a declared filename into a DocumentKind.

    Args:
        declared_name: Filename as supplied by the uploader.

    Returns:
        DocumentKind: PDF or DOCX, or UNSUPPORTED for unknown/missing extensions.
    """
    return EXTENSION_KINDS.get(get_extension(declared_name), DocumentKind.UNSUPPORTED)


def supported_extensions() -> list:
    """Extensions the pipeline can extract"""
    return sorted(EXTENSION_KINDS)
