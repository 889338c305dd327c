import logging
from typing import Dict, List, Optional

import requests

from config import Settings

logger = logging.getLogger(__name__)


class LLMError(Exception):
    """Raised when the chat-completion call fails or returns an unusable body."""

    def __init__(self, message: str, detail: Optional[object] = None):
        super().__init__(message)
        self.detail = detail

    def describe(self) -> str:
        """Upstream response body when there is one, else the message."""
        return str(self.detail) if self.detail else str(self)


def _headers(settings: Settings) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {settings.api_key}",
        "Content-Type": "application/json",
        "HTTP-Referer": settings.referer,
        "X-Title": settings.app_title,
    }


def _response_detail(response: Optional[requests.Response]) -> Optional[object]:
    if response is None:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def chat_completion(settings: Settings, messages: List[Dict[str, str]]) -> str:
    """Send role-tagged messages to OpenRouter and return the reply text."""
    payload = {
        "model": settings.model_name,
        "messages": messages,
    }

    try:
        response = requests.post(
            settings.api_url,
            headers=_headers(settings),
            json=payload,
            timeout=settings.timeout,
        )
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise LLMError(str(e), _response_detail(e.response)) from e

    try:
        data = response.json()
        content = data["choices"][0]["message"]["content"]
    except (ValueError, KeyError, IndexError, TypeError) as e:
        raise LLMError(f"Malformed chat-completion response: {e}", response.text) from e

    if not isinstance(content, str):
        raise LLMError("Chat-completion response has no text content", response.text)
    return content
