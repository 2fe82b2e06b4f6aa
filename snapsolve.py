# snapsolve.py
import logging
import sys

import click
import httpx

from config import settings
from handlers.answer import Responder
from handlers.ocr import build_backend
from handlers.solve import EXIT_CONFIG_ERROR, EXIT_IO_ERROR, solve_image
from runtime.errors import ConfigError, ImageReadError

logger = logging.getLogger(__name__)


def build_http_client(timeout: float = settings.HTTP_TIMEOUT_SEC) -> httpx.Client:
    return httpx.Client(timeout=timeout)


def _echo_err(message: str) -> None:
    click.echo(message, err=True)


@click.command()
@click.argument("image_path", metavar="IMAGE")
@click.option(
    "--backend",
    type=click.Choice(settings.BACKENDS),
    default=None,
    help="Text extraction backend (defaults to OCR_BACKEND, then ocr_space)",
)
@click.option("--verbose", is_flag=True, help="Log requests and the raw OCR response to stderr")
def cli(image_path, backend, verbose):
    """Extract the text in IMAGE and print a concise answer to it."""
    logging.basicConfig(format="%(asctime)s - %(levelname)s - %(message)s")
    # basicConfig is a no-op once root has handlers, so set the level directly
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.WARNING)
    backend = backend or settings.OCR_BACKEND
    logger.debug("Using %s backend", backend)
    try:
        creds = settings.resolve_credentials(backend)
        limits = settings.resolve_limits()
    except ConfigError as exc:
        _echo_err(f"Error: {exc}")
        sys.exit(EXIT_CONFIG_ERROR)

    with build_http_client(limits["http_timeout_sec"]) as client:
        extractor = build_backend(
            backend,
            client,
            groq_api_key=creds["groq_api_key"],
            ocr_space_api_key=creds.get("ocr_space_api_key"),
            vision_max_tokens=limits["vision_max_tokens"],
        )
        responder = Responder(client, creds["groq_api_key"], max_tokens=limits["answer_max_tokens"])
        try:
            outcome = solve_image(image_path, extractor, responder, out=click.echo, err=_echo_err)
        except ImageReadError as exc:
            _echo_err(f"Error: {exc}")
            sys.exit(EXIT_IO_ERROR)

    sys.exit(outcome.exit_code)


if __name__ == "__main__":
    cli()
