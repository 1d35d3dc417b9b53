from .client import NO_ANSWER, GeminiClient
from .prompts import build_prompt

__all__ = ["GeminiClient", "build_prompt", "NO_ANSWER"]
