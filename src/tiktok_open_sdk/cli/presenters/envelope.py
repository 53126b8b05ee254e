"""Presenters for API responses in the CLI."""

import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...config import Config
from ...responses import ResponseEnvelope


def mask_secret(value: str | None) -> str:
    """Show only the last four characters of a secret."""
    if not value:
        return "(not set)"
    if len(value) <= 4:
        return "****"
    return f"****{value[-4:]}"


class EnvelopePresenter:
    """Renders ResponseEnvelopes and configuration with Rich.

    Contains no business logic, only presentation.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def present(self, envelope: ResponseEnvelope) -> None:
        style = "green" if envelope.success else "red"
        self.console.print(f"[{style}]HTTP {envelope.code}[/{style}]")
        self.console.print_json(json.dumps(envelope.response))

    def present_error(self, title: str, message: str) -> None:
        self.console.print(Panel(f"[red]{message}[/red]", title=title, border_style="red"))

    def present_config(self, config: Config) -> None:
        table = Table(title="TikTok Open SDK configuration")
        table.add_column("Setting", style="cyan")
        table.add_column("Value")

        user_auth = config.user_auth
        rows = [
            ("client_key", config.client_key or "(not set)"),
            ("client_secret", mask_secret(config.client_secret)),
            ("user_info_url", config.user_info_url),
            ("creator_info_query_url", config.creator_info_query_url),
            ("user_auth.auth_url", user_auth.auth_url),
            ("user_auth.token_url", user_auth.token_url),
            ("user_auth.revoke_token_url", user_auth.revoke_token_url),
            ("user_auth.scopes", ",".join(user_auth.scopes) or "(none)"),
            ("user_auth.redirect_uri", user_auth.redirect_uri or "(not set)"),
            ("http.read_timeout", f"{config.http.read_timeout:g}s"),
            ("http.open_timeout", f"{config.http.open_timeout:g}s"),
        ]
        for name, value in rows:
            table.add_row(name, value)

        self.console.print(table)
