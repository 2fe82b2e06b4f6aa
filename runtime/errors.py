from __future__ import annotations

from typing import Optional


class ConfigError(Exception):
    pass


class ImageReadError(Exception):
    pass


class RemoteRequestError(Exception):
    """Non-success reply (or transport failure) from a remote service."""

    def __init__(self, service: str, status: Optional[int], body: str):
        self.service = service
        self.status = status
        self.body = body
        if status is None:
            super().__init__(f"{service} request failed: {body}")
        else:
            super().__init__(f"{service} request failed with status: {status}, details: {body}")
