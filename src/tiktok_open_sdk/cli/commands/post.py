"""Content posting commands."""

import typer

from ...exceptions import RequestValidationError
from ...open_api import PostPublish
from .. import context

app = typer.Typer(help="Content posting endpoints")


@app.command("creator-info")
def creator_info(
    access_token: str = typer.Argument(..., help="User access token"),
) -> None:
    """Query the creator's posting capabilities."""
    with PostPublish(context.load_config()) as post:
        try:
            envelope = post.creator_info_query(access_token)
        except RequestValidationError as e:
            context.reject(e)
    context.emit(envelope)
