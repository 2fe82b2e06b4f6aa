"""
OCR.space backend.

Sends the image as a base64 data URL in a form-encoded POST and reads
ParsedResults[0].ParsedText from the JSON reply.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

import httpx

from config import settings
from handlers.ocr.contracts import ImagePayload
from runtime.errors import RemoteRequestError

logger = logging.getLogger(__name__)


def parsed_text(data: Dict[str, Any]) -> str:
    results = data.get("ParsedResults")
    if not isinstance(results, list) or not results:
        return ""
    first = results[0] if isinstance(results[0], dict) else {}
    text = first.get("ParsedText")
    return text.strip() if isinstance(text, str) else ""


class OcrSpaceBackend:
    name = "ocr_space"
    service = "OCR"

    def __init__(
        self,
        client: httpx.Client,
        api_key: str,
        url: str = settings.OCR_SPACE_URL,
        engine: str = settings.OCR_SPACE_ENGINE,
        language: str = settings.OCR_LANGUAGE,
    ):
        self.client = client
        self.api_key = api_key
        self.url = url
        self.engine = engine
        self.language = language

    def build_form(self, payload: ImagePayload) -> Dict[str, str]:
        return {
            "apikey": self.api_key,
            "base64Image": payload.data_url,
            "language": self.language,
            "isOverlayRequired": "false",
            "OCREngine": str(self.engine),
        }

    def provenance(self) -> Dict[str, Any]:
        return {"engine": str(self.engine)}

    def extract(self, payload: ImagePayload) -> str:
        try:
            resp = self.client.post(self.url, data=self.build_form(payload))
        except httpx.HTTPError as exc:
            raise RemoteRequestError(self.service, None, str(exc)) from exc

        if not resp.is_success:
            raise RemoteRequestError(self.service, resp.status_code, resp.text)

        try:
            data = resp.json()
        except ValueError as exc:
            raise RemoteRequestError(self.service, resp.status_code, f"invalid JSON response: {resp.text[:600]}") from exc
        if not isinstance(data, dict):
            return ""

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("OCR Response: %s", json.dumps(data, indent=2, ensure_ascii=False))
        if data.get("IsErroredOnProcessing"):
            logger.warning("OCR.space reported a processing error: %s", data.get("ErrorMessage"))

        return parsed_text(data)
