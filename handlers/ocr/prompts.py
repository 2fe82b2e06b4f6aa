from __future__ import annotations

PROMPT_VERSION = "ocr_prompt_v2"


def transcription_prompt() -> str:
    return (
        "Transcribe all text visible in this image exactly as written.\n"
        "Rules:\n"
        "- Preserve line breaks.\n"
        "- Do not paraphrase.\n"
        "- Do not add explanations or commentary.\n"
        "- Return only the extracted text."
    )
