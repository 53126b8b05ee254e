"""Configuration commands."""

import typer

from ...config import ConfigSchema, load_dotenv_file, validate_all
from .. import context
from ..presenters.envelope import EnvelopePresenter

app = typer.Typer(help="Configuration management")


@app.command("show")
def show() -> None:
    """Show the configuration loaded from the environment."""
    EnvelopePresenter(context.console).present_config(context.load_config())


@app.command("validate")
def validate() -> None:
    """Check every TIKTOK_* variable and report all problems at once."""
    load_dotenv_file()
    errors = validate_all()
    if not errors:
        context.console.print("[green]Configuration OK[/green]")
        return

    presenter = EnvelopePresenter(context.console)
    for error in errors:
        presenter.present_error("Configuration Error", str(error))
    raise typer.Exit(context.EXIT_VALIDATION_ERROR)


@app.command("vars")
def env_vars() -> None:
    """List the environment variables the SDK reads."""
    for spec in sorted(ConfigSchema.all_specs().values(), key=lambda s: s.name):
        context.console.print(f"[cyan]{spec.name}[/cyan]  {spec.description}")
