from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List

import requests

DEFAULT_TRANSLATE_URL = "https://translate.googleapis.com/translate_a/single"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/94.0.4606.81 Safari/537.36"
)


class TranslationError(RuntimeError):
    """Raised when the translation service returns something unusable."""


class BaseTranslator(ABC):
    @abstractmethod
    def translate(self, text: str, source: str, target: str) -> str:
        raise NotImplementedError


class GoogleTranslator(BaseTranslator):
    """Client for the public Google Translate web endpoint, one request per string."""

    def __init__(
        self,
        url: str = DEFAULT_TRANSLATE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ) -> None:
        self.url = url
        self.headers = {"User-Agent": user_agent}
        self.timeout = timeout

    def translate(self, text: str, source: str, target: str) -> str:
        if not text.strip():
            return text
        params = {"client": "gtx", "sl": source, "tl": target, "dt": "t", "q": text}
        response = requests.get(self.url, params=params, headers=self.headers, timeout=self.timeout)
        response.raise_for_status()
        try:
            data = response.json()
        except ValueError as exc:
            raise TranslationError(f"Non-JSON response from {self.url}") from exc
        return self._join_segments(data)

    @staticmethod
    def _join_segments(data: Any) -> str:
        # [[["translated", "original", ...], ...], null, "en", ...]
        if not isinstance(data, list) or not data or not isinstance(data[0], list):
            raise TranslationError(f"Unexpected translation response: {data!r}")
        segments: List[str] = []
        for segment in data[0]:
            if isinstance(segment, list) and segment and isinstance(segment[0], str):
                segments.append(segment[0])
        if not segments:
            raise TranslationError(f"No translated text in response: {data!r}")
        return "".join(segments)
