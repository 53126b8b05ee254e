"""User info commands."""

import typer

from ...exceptions import RequestValidationError
from ...open_api import UserApi
from .. import context

app = typer.Typer(help="User endpoints")


@app.command("info")
def info(
    access_token: str = typer.Argument(..., help="User access token"),
    field: list[str] = typer.Option(
        ["open_id", "display_name"], "--field", "-f", help="Field to fetch (repeatable)"
    ),
    validate: bool = typer.Option(True, "--validate/--no-validate", help="Check inputs first"),
) -> None:
    """Fetch the authorized user's profile.

    Example:
        tiktok-open user info act.example --field open_id --field username
    """
    with UserApi(context.load_config()) as api:
        try:
            envelope = api.get_user_info(access_token, field, validate=validate)
        except RequestValidationError as e:
            context.reject(e)
    context.emit(envelope)
