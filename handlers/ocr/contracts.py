from dataclasses import dataclass, field
from typing import Any, Dict, Protocol


@dataclass(frozen=True)
class ImagePayload:
    path: str
    mime_type: str
    data_url: str


@dataclass
class OcrResult:
    text: str
    backend: str
    provenance: Dict[str, Any] = field(default_factory=dict)
    debug: Dict[str, Any] = field(default_factory=dict)


class OcrBackend(Protocol):
    name: str

    def extract(self, payload: ImagePayload) -> str:
        """Return the transcribed text (possibly empty) or raise RemoteRequestError."""
        ...

    def provenance(self) -> Dict[str, Any]:
        ...
