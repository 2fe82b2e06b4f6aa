"""
Minimal client for OpenAI-compatible chat-completion endpoints (Groq).

Both the vision transcription backend and the answer responder go through
here so that status handling and response parsing stay identical.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

import httpx

from runtime.errors import RemoteRequestError

logger = logging.getLogger(__name__)


def post_chat_completion(
    client: httpx.Client,
    url: str,
    api_key: str,
    payload: Dict[str, Any],
    *,
    service: str,
) -> Dict[str, Any]:
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }
    logger.debug("POST %s model=%s", url, payload.get("model"))
    try:
        resp = client.post(url, json=payload, headers=headers)
    except httpx.HTTPError as exc:
        raise RemoteRequestError(service, None, str(exc)) from exc

    if not resp.is_success:
        raise RemoteRequestError(service, resp.status_code, resp.text)

    try:
        data = resp.json()
    except ValueError as exc:
        raise RemoteRequestError(service, resp.status_code, f"invalid JSON response: {resp.text[:600]}") from exc
    return data if isinstance(data, dict) else {}


def first_choice_content(data: Dict[str, Any]) -> str:
    """choices[0].message.content, or "" when any part of that path is missing."""
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return ""
    first = choices[0] if isinstance(choices[0], dict) else {}
    message = first.get("message")
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) else ""
