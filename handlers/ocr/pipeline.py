from __future__ import annotations

import logging
import time
from typing import Optional

import httpx

from config import settings
from handlers.ocr.contracts import OcrBackend, OcrResult
from handlers.ocr.encoding import encode_image
from handlers.ocr.ocr_space import OcrSpaceBackend
from handlers.ocr.vision_backend import VisionChatBackend
from runtime.errors import ConfigError

logger = logging.getLogger(__name__)


def build_backend(
    name: str,
    client: httpx.Client,
    *,
    groq_api_key: str,
    ocr_space_api_key: Optional[str] = None,
    vision_max_tokens: int = settings.VISION_MAX_TOKENS,
) -> OcrBackend:
    if name == "ocr_space":
        if not ocr_space_api_key:
            raise ConfigError("OCR_SPACE_API_KEY environment variable is not set.")
        return OcrSpaceBackend(client, ocr_space_api_key)
    if name == "vision":
        return VisionChatBackend(client, groq_api_key, max_tokens=vision_max_tokens)
    raise ConfigError(f"Unknown OCR backend '{name}'. Expected one of: {', '.join(settings.BACKENDS)}")


def run_ocr(image_path: str, backend: OcrBackend) -> OcrResult:
    t0 = time.time()
    payload = encode_image(image_path)
    logger.info("Extracting text from %s (%s) with %s", image_path, payload.mime_type, backend.name)
    text = backend.extract(payload)

    return OcrResult(
        text=text,
        backend=backend.name,
        provenance={"mime_type": payload.mime_type, **backend.provenance()},
        debug={"latency_sec": round(time.time() - t0, 3)},
    )
