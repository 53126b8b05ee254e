"""Shared state for CLI commands."""

from typing import NoReturn

import typer
from rich.console import Console

from ..config import Config, ConfigError
from ..exceptions import RequestValidationError
from ..responses import ResponseEnvelope
from .presenters.envelope import EnvelopePresenter

EXIT_REMOTE_FAILURE = 1
EXIT_VALIDATION_ERROR = 2

console = Console()


def load_config() -> Config:
    try:
        return Config.from_env()
    except ConfigError as e:
        EnvelopePresenter(console).present_error("Configuration Error", str(e))
        raise typer.Exit(EXIT_VALIDATION_ERROR) from None


def emit(envelope: ResponseEnvelope) -> None:
    """Print an envelope and exit non-zero when the API reported a failure."""
    EnvelopePresenter(console).present(envelope)
    if not envelope.success:
        raise typer.Exit(EXIT_REMOTE_FAILURE)


def reject(error: RequestValidationError) -> NoReturn:
    EnvelopePresenter(console).present_error("Invalid Request", str(error))
    raise typer.Exit(EXIT_VALIDATION_ERROR) from None
