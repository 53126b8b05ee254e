"""OAuth commands: authorization URL and token lifecycle."""

import typer

from ...open_api import ClientAuth, UserAuth
from .. import context

app = typer.Typer(help="OAuth authorization and tokens")


@app.command("url")
def url(
    scope: list[str] = typer.Option(None, "--scope", "-s", help="Scope to request (repeatable)"),
    state: str = typer.Option(None, "--state", help="Opaque CSRF state"),
    redirect_uri: str = typer.Option(None, "--redirect-uri", help="Override redirect URI"),
) -> None:
    """Print the authorization URL.

    Example:
        tiktok-open auth url --scope user.info.basic --state xyz
    """
    overrides: dict[str, object] = {}
    if scope:
        overrides["scope"] = scope
    if state is not None:
        overrides["state"] = state
    if redirect_uri is not None:
        overrides["redirect_uri"] = redirect_uri

    uri = UserAuth(context.load_config()).authorization_uri(overrides)
    context.console.print(uri, soft_wrap=True, markup=False)


@app.command("token")
def token(
    code: str = typer.Argument(..., help="Authorization code from the callback"),
    redirect_uri: str = typer.Option(None, "--redirect-uri", help="Override redirect URI"),
) -> None:
    """Exchange an authorization code for an access token."""
    with UserAuth(context.load_config()) as auth:
        if redirect_uri is None:
            envelope = auth.fetch_access_token(code)
        else:
            envelope = auth.fetch_access_token(code, redirect_uri=redirect_uri)
    context.emit(envelope)


@app.command("refresh")
def refresh(
    refresh_token: str = typer.Argument(..., help="Refresh token"),
) -> None:
    """Exchange a refresh token for a new access token."""
    with UserAuth(context.load_config()) as auth:
        envelope = auth.refresh_access_token(refresh_token)
    context.emit(envelope)


@app.command("revoke")
def revoke(
    access_token: str = typer.Argument(..., help="Access token to revoke"),
) -> None:
    """Revoke an access token."""
    with UserAuth(context.load_config()) as auth:
        envelope = auth.revoke_access_token(access_token)
    context.emit(envelope)


@app.command("client-token")
def client_token() -> None:
    """Fetch a client access token (client credentials flow)."""
    with ClientAuth(context.load_config()) as auth:
        envelope = auth.fetch_client_token()
    context.emit(envelope)
