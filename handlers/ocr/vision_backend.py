from __future__ import annotations

import logging
from typing import Any, Dict

import httpx

from config import settings
from handlers.chat_api import first_choice_content, post_chat_completion
from handlers.ocr.contracts import ImagePayload
from handlers.ocr.prompts import PROMPT_VERSION, transcription_prompt

logger = logging.getLogger(__name__)


class VisionChatBackend:
    """Transcribes an image with a vision-capable chat model."""

    name = "vision"
    service = "Vision"

    def __init__(
        self,
        client: httpx.Client,
        api_key: str,
        model: str = settings.VISION_MODEL,
        url: str = settings.CHAT_COMPLETIONS_URL,
        max_tokens: int = settings.VISION_MAX_TOKENS,
    ):
        self.client = client
        self.api_key = api_key
        self.model = model
        self.url = url
        self.max_tokens = max_tokens

    def build_payload(self, payload: ImagePayload) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": transcription_prompt()},
                        {"type": "image_url", "image_url": {"url": payload.data_url}},
                    ],
                }
            ],
            "temperature": settings.TEMPERATURE,
            "max_tokens": self.max_tokens,
        }

    def provenance(self) -> Dict[str, Any]:
        return {"model": self.model, "prompt_version": PROMPT_VERSION}

    def extract(self, payload: ImagePayload) -> str:
        data = post_chat_completion(
            self.client,
            self.url,
            self.api_key,
            self.build_payload(payload),
            service=self.service,
        )
        text = first_choice_content(data).strip()
        logger.debug("Vision transcription returned %d chars", len(text))
        return text
