from __future__ import annotations

import json
import logging
import re
from enum import Enum
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from gh_app_token._version import __version__
from gh_app_token.api.models import InstallationAccessToken
from gh_app_token.config.loader import resolve_config
from gh_app_token.errors import ConfigError, GhAppTokenError
from gh_app_token.log import configure_logging
from gh_app_token.resolver import issue_installation_token

app = typer.Typer(add_completion=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)
logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")


class OutputFormat(str, Enum):
    token = "token"
    json = "json"
    export = "export"


def _parse_int(value: Optional[str], flag: str, envvar: str) -> Optional[int]:
    if not value:
        return None
    if _INT_RE.fullmatch(value) is None:
        raise ConfigError(f"invalid {flag} / {envvar}: {value!r} is not an integer")
    return int(value)


def _parse_timeout(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    try:
        seconds = float(value)
    except ValueError as exc:
        raise ConfigError(
            f"invalid --timeout / GH_APP_TOKEN_TIMEOUT: {value!r} is not a number"
        ) from exc
    if not seconds > 0:
        raise ConfigError(f"invalid --timeout / GH_APP_TOKEN_TIMEOUT: {value!r} must be positive")
    return seconds


def _parse_format(value: str) -> OutputFormat:
    try:
        return OutputFormat(value.lower())
    except ValueError as exc:
        choices = ", ".join(item.value for item in OutputFormat)
        raise ConfigError(f"invalid --format: {value!r} (choose from {choices})") from exc


def _render(result: InstallationAccessToken, output: OutputFormat) -> str:
    if output is OutputFormat.json:
        expires_at = result.expires_at.isoformat() if result.expires_at else None
        return json.dumps({"token": result.token, "expires_at": expires_at}, indent=2)
    if output is OutputFormat.export:
        return f'export GITHUB_TOKEN="{result.token}"'
    return result.token or ""


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(code=1)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gh-app-token {__version__}")
        raise typer.Exit()


@app.command(help="Generate a GitHub App installation token using JWT authentication.")
def main(
    app_id: Optional[str] = typer.Option(
        None,
        "--app-id",
        envvar="GH_APP_TOKEN_APP_ID",
        help="GitHub App ID",
        show_envvar=True,
    ),
    private_key: Optional[str] = typer.Option(
        None,
        "--private-key",
        envvar="GH_APP_TOKEN_PRIVATE_KEY",
        help="Path to the GitHub App private key (.pem)",
        show_envvar=True,
    ),
    installation_id: Optional[str] = typer.Option(
        None,
        "--installation-id",
        envvar="GH_APP_TOKEN_INSTALLATION_ID",
        help="GitHub App installation ID",
        show_envvar=True,
    ),
    org: Optional[str] = typer.Option(
        None,
        "--org",
        envvar="GH_APP_TOKEN_ORG",
        help="Organization name to look up the installation for",
        show_envvar=True,
    ),
    repo: Optional[str] = typer.Option(
        None,
        "--repo",
        envvar="GH_APP_TOKEN_REPO",
        help="Repository (owner/repo) to look up the installation for",
        show_envvar=True,
    ),
    user: Optional[str] = typer.Option(
        None,
        "--user",
        envvar="GH_APP_TOKEN_USER",
        help="User name to look up the installation for",
        show_envvar=True,
    ),
    host: Optional[str] = typer.Option(
        None,
        "--host",
        envvar="GH_HOST",
        help="GitHub host for GHE.com or GitHub Enterprise Server",
        show_envvar=True,
    ),
    timeout: Optional[str] = typer.Option(
        None,
        "--timeout",
        envvar="GH_APP_TOKEN_TIMEOUT",
        help="Network timeout in seconds",
        show_envvar=True,
    ),
    config: Optional[str] = typer.Option(
        None,
        "--config",
        envvar="GH_APP_TOKEN_CONFIG",
        help="YAML file with app_id, private_key, host and timeout_s defaults",
        show_envvar=True,
    ),
    output: str = typer.Option(
        OutputFormat.token.value,
        "--format",
        help="Print the bare token (token), a JSON document (json), or a shell export line (export)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log API calls to stderr"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    configure_logging(verbose=verbose, console=err_console)
    try:
        output_format = _parse_format(output)
        app_config = resolve_config(
            app_id=_parse_int(app_id, "--app-id", "GH_APP_TOKEN_APP_ID"),
            private_key_path=private_key,
            installation_id=_parse_int(
                installation_id, "--installation-id", "GH_APP_TOKEN_INSTALLATION_ID"
            ),
            org=org,
            repo=repo,
            user=user,
            host=host,
            timeout_s=_parse_timeout(timeout),
            config_path=config,
        )
        result = issue_installation_token(app_config)
    except GhAppTokenError as exc:
        logger.debug("Token issuance failed", exc_info=True)
        _fail(str(exc))
    except KeyboardInterrupt:
        _fail("interrupted")
    except Exception as exc:
        logger.debug("Unexpected failure", exc_info=True)
        _fail(f"unexpected error: {exc}")
    else:
        typer.echo(_render(result, output_format))
