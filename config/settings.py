# config/settings.py
import os

from dotenv import find_dotenv, load_dotenv

from runtime.errors import ConfigError

# .env in the working directory; real environment variables win.
load_dotenv(find_dotenv(usecwd=True), override=False)

# Extraction backend: "ocr_space" or "vision"
OCR_BACKEND = os.getenv("OCR_BACKEND", "ocr_space")

# OCR.space
OCR_SPACE_URL = os.getenv("OCR_SPACE_URL", "https://api.ocr.space/parse/image")
OCR_SPACE_ENGINE = os.getenv("OCR_SPACE_ENGINE", "2")
OCR_LANGUAGE = "auto"

# Groq (OpenAI-compatible chat completions)
# *_MAX_TOKENS and HTTP_TIMEOUT_SEC are defaults; env overrides go through resolve_limits()
CHAT_COMPLETIONS_URL = os.getenv("CHAT_COMPLETIONS_URL", "https://api.groq.com/openai/v1/chat/completions")
VISION_MODEL = os.getenv("VISION_MODEL", "meta-llama/llama-4-scout-17b-16e-instruct")
VISION_MAX_TOKENS = 1024
ANSWER_MODEL = os.getenv("ANSWER_MODEL", "qwen-qwq-32b")
ANSWER_MAX_TOKENS = 6000
TEMPERATURE = 0

HTTP_TIMEOUT_SEC = 60.0

BACKENDS = ("ocr_space", "vision")


def _require(name: str) -> str:
    value = (os.environ.get(name) or "").strip()
    if not value:
        raise ConfigError(f"{name} environment variable is not set.")
    return value


def resolve_credentials(backend: str) -> dict:
    """Read API keys for a run. Secrets are never taken from module constants."""
    if backend not in BACKENDS:
        raise ConfigError(f"Unknown OCR backend '{backend}'. Expected one of: {', '.join(BACKENDS)}")
    creds = {"groq_api_key": _require("GROQ_API_KEY")}
    if backend == "ocr_space":
        creds["ocr_space_api_key"] = _require("OCR_SPACE_API_KEY")
    return creds


def _positive(name: str, default, cast):
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got '{raw}'.") from None
    if value <= 0:
        raise ConfigError(f"{name} must be greater than zero, got '{raw}'.")
    return value


def resolve_limits() -> dict:
    return {
        "vision_max_tokens": _positive("VISION_MAX_TOKENS", VISION_MAX_TOKENS, int),
        "answer_max_tokens": _positive("ANSWER_MAX_TOKENS", ANSWER_MAX_TOKENS, int),
        "http_timeout_sec": _positive("HTTP_TIMEOUT_SEC", HTTP_TIMEOUT_SEC, float),
    }
