"""
Image → text → answer pipeline.

Runs the extractor and the responder strictly one after the other and
writes the user-facing output. Returns a RunOutcome instead of exiting so
callers (the CLI, tests) decide what to do with the exit code.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from handlers.ocr.contracts import OcrBackend
from handlers.ocr.pipeline import run_ocr
from runtime.errors import RemoteRequestError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_REMOTE_FAILURE = 1
EXIT_USAGE = 2
EXIT_CONFIG_ERROR = 3
EXIT_IO_ERROR = 4

NO_TEXT_MESSAGE = "No text was extracted from the image."

Writer = Callable[[str], None]


class AnswerSource(Protocol):
    def answer(self, text: str) -> str:
        ...


@dataclass
class RunOutcome:
    exit_code: int
    extracted_text: str = ""
    answer: Optional[str] = None


def _report_failure(exc: RemoteRequestError, err: Writer) -> None:
    if exc.status is None:
        err(f"{exc.service} request failed: {exc.body}")
    else:
        err(f"{exc.service} request failed with status: {exc.status}, details: {exc.body}")


def solve_image(
    image_path: str,
    backend: OcrBackend,
    responder: AnswerSource,
    out: Writer,
    err: Writer,
) -> RunOutcome:
    try:
        result = run_ocr(image_path, backend)
    except RemoteRequestError as exc:
        _report_failure(exc, err)
        return RunOutcome(EXIT_REMOTE_FAILURE)

    text = result.text
    if not text:
        out(NO_TEXT_MESSAGE)
        return RunOutcome(EXIT_OK)

    out(f"\nExtracted text from image: {text}\n")

    try:
        answer = responder.answer(text)
    except RemoteRequestError as exc:
        _report_failure(exc, err)
        return RunOutcome(EXIT_REMOTE_FAILURE, extracted_text=text)

    out(f"Final answer: {answer}")
    logger.info(
        "Extraction via %s took %ss %s", result.backend, result.debug.get("latency_sec"), result.provenance
    )
    return RunOutcome(EXIT_OK, extracted_text=text, answer=answer)
