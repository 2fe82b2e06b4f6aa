"""Repository-level pytest fixtures.

Real API keys picked up from the shell or a local .env are cleared so tests
only ever see the credentials they set themselves.
"""

import pytest


@pytest.fixture(autouse=True)
def _isolate_credentials(monkeypatch):
    for name in ("GROQ_API_KEY", "OCR_SPACE_API_KEY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_log_level():
    import logging

    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
