from __future__ import annotations

import base64
from pathlib import Path

from handlers.ocr.contracts import ImagePayload
from runtime.errors import ImageReadError

DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".tif": "image/tiff",
    ".tiff": "image/tiff",
    ".pdf": "application/pdf",
}


def mime_type_for(path: str) -> str:
    return MIME_TYPES.get(Path(path).suffix.lower(), DEFAULT_MIME_TYPE)


def to_data_url(mime_type: str, data: bytes) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def load_image(path: str) -> bytes:
    p = Path(path)
    try:
        return p.read_bytes()
    except OSError as exc:
        raise ImageReadError(f"Could not read image {path}: {exc.strerror or exc}") from exc


def encode_image(path: str) -> ImagePayload:
    mime_type = mime_type_for(path)
    return ImagePayload(path=path, mime_type=mime_type, data_url=to_data_url(mime_type, load_image(path)))
