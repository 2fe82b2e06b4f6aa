from __future__ import annotations

import logging
from typing import Any, Dict

import httpx

from config import settings
from handlers.answer.prompts import answer_prompt
from handlers.chat_api import first_choice_content, post_chat_completion

logger = logging.getLogger(__name__)


class Responder:
    """Asks a text-generation model for a concise answer to extracted text."""

    service = "Text model"

    def __init__(
        self,
        client: httpx.Client,
        api_key: str,
        model: str = settings.ANSWER_MODEL,
        url: str = settings.CHAT_COMPLETIONS_URL,
        max_tokens: int = settings.ANSWER_MAX_TOKENS,
    ):
        self.client = client
        self.api_key = api_key
        self.model = model
        self.url = url
        self.max_tokens = max_tokens

    def build_payload(self, text: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": answer_prompt(text)}],
            "temperature": settings.TEMPERATURE,
            "max_tokens": self.max_tokens,
        }

    def answer(self, text: str) -> str:
        data = post_chat_completion(
            self.client,
            self.url,
            self.api_key,
            self.build_payload(text),
            service=self.service,
        )
        content = first_choice_content(data)
        if not content:
            logger.warning("Text model returned no content")
        return content
