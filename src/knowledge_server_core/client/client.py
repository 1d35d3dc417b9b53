"""
HTTP client for the knowledge server API
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import httpx

from ..utils.file_utils import detect_content_type


class KnowledgeClientError(Exception):
    """Non-2xx response from the knowledge server"""

    def __init__(self, status_code: int, error: str, kind: Optional[str] = None):
        self.status_code = status_code
        self.error = error
        self.kind = kind
        super().__init__(f"{status_code} {kind or ''} {error}".strip())


class KnowledgeClient:
    """Async client for a running knowledge server"""

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        timeout: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: Server address
            timeout: Request timeout in seconds; OCR uploads can take a while
            transport: Optional httpx transport, e.g. for tests
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def _api_call(self, method: str, endpoint: str, **kwargs) -> Dict[str, Any]:
        """Send one request and decode the JSON body"""
        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self._transport
        ) as client:
            response = await client.request(method, endpoint, **kwargs)

        try:
            body = response.json()
        except ValueError:
            body = {"error": response.text}

        if response.is_error:
            raise KnowledgeClientError(response.status_code, body.get("error", ""), body.get("kind"))
        return body

    async def add_knowledge(self, content: str, source: str) -> Dict[str, Any]:
        """Add manually typed knowledge"""
        return await self._api_call("POST", "/add", json={"content": content, "source": source})

    async def upload_document(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """Upload a PDF or DOCX file"""
        file_path = Path(file_path)
        files = {
            "file": (file_path.name, file_path.read_bytes(), detect_content_type(file_path.name)),
        }
        return await self._api_call("POST", "/upload", files=files)

    async def ask(self, question: str) -> str:
        """Ask a question, returns the answer text"""
        body = await self._api_call("POST", "/ask", json={"question": question})
        return body["answer"]
