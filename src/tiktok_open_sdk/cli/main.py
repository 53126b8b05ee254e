"""Main CLI entry point for tiktok-open."""

import os

import typer

from .. import __version__
from ..config import ConfigSchema, load_dotenv_file
from ..log import configure_logging
from . import context
from .commands import auth, config, post, user

app = typer.Typer(
    name="tiktok-open",
    help="TikTok Open SDK CLI - OAuth and Open API calls from the terminal",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(auth.app, name="auth", help="OAuth authorization and tokens")
app.add_typer(user.app, name="user", help="User endpoints")
app.add_typer(post.app, name="post", help="Content posting endpoints")
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    context.console.print(
        f"[bold cyan]tiktok-open[/bold cyan] version [green]{__version__}[/green]"
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """TikTok Open SDK CLI."""
    load_dotenv_file()
    spec = ConfigSchema.LOG_LEVEL
    configure_logging("DEBUG" if verbose else os.environ.get(spec.name, spec.default))


if __name__ == "__main__":
    app()
