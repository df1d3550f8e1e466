"""Filelocker CLI - main commands."""

import json
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import structlog
import typer
from rich.console import Console
from rich.table import Table

from filelocker.cli.durations import parse_duration
from filelocker.cli.settings import CliSettings, env_var, resolve_settings
from filelocker.client import FilelockerClient
from filelocker.exceptions import FilelockerError
from filelocker.models.files import format_size
from filelocker.version import __version__

app = typer.Typer(
    name="filelocker",
    help="A command line client for Filelocker 2.",
    add_completion=False,
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

logger = structlog.get_logger(__name__)


def configure_logging(verbose: bool) -> None:
    """Render structlog events to stderr; debug level when verbose."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.WARNING
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def connect(settings: CliSettings) -> FilelockerClient:
    """Log in with the resolved settings."""
    return FilelockerClient.login(settings.login, settings.api_key, settings.client_config())


def fail(error: Exception) -> typer.Exit:
    err_console.print(
        f"Error: {error}", style="red", markup=False, highlight=False, soft_wrap=True
    )
    return typer.Exit(1)


@contextmanager
def session(ctx: typer.Context) -> Iterator[FilelockerClient]:
    """Open a logged-in client for a command; any FilelockerError exits with status 1."""
    settings: CliSettings = ctx.obj
    try:
        with connect(settings) as client:
            yield client
    except FilelockerError as e:
        raise fail(e) from e


def print_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=4))


def print_messages(info: tuple[str, ...]) -> None:
    for message in info:
        typer.echo(message)


@app.callback()
def main(
    ctx: typer.Context,
    login: Optional[str] = typer.Option(
        None, "--login", "-l", envvar=env_var("login"),
        help="The user id to use for connections to filelocker",
    ),
    key: Optional[str] = typer.Option(
        None, "--key", "-k", envvar=env_var("key"),
        help="The API key to use for connections to filelocker",
    ),
    url: Optional[str] = typer.Option(
        None, "--url", "-u", envvar=env_var("url"),
        help="The base URL of filelocker (e.g. https://files.yale.edu)",
    ),
    timeout: Optional[str] = typer.Option(
        None, "--timeout", "-t", envvar=env_var("timeout"),
        help="HTTP client timeout, e.g. 30s or 1m [default: 30s]",
    ),
    as_json: bool = typer.Option(
        False, "--json", "-j", envvar=env_var("json"),
        help="Format the response as JSON where applicable",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config",
        help="YAML config file (default is ~/.filelocker.yaml)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Interact with Filelocker 2 files, groups and secure messages."""
    configure_logging(verbose)
    try:
        ctx.obj = resolve_settings(
            login=login,
            api_key=key,
            url=url,
            timeout=timeout,
            as_json=as_json,
            config_path=config,
        )
    except FilelockerError as e:
        raise fail(e) from e


@app.command()
def read(
    ctx: typer.Context,
    all_messages: bool = typer.Option(
        False, "--all", "-a", help="Get all messages instead of a count of new messages"
    ),
    mark: bool = typer.Option(False, "--mark", "-m", help="Mark listed messages as read"),
    as_json: bool = typer.Option(False, "--json", "-j", help="Format the response as JSON"),
):
    """Read secure messages from filelocker."""
    settings: CliSettings = ctx.obj
    as_json = as_json or settings.as_json

    with session(ctx) as client:
        if not all_messages:
            count = client.count_new_messages().count
            if as_json:
                print_json({"new_messages": count})
            else:
                typer.echo(f"New Messages: {count}")
            return

        resp = client.list_messages()
        if as_json:
            print_json(
                {
                    "messages": [m.to_dict() for m in resp.messages],
                    "info": list(resp.info_messages),
                    "error": list(resp.error_messages),
                }
            )
        else:
            for m in resp.messages:
                typer.echo(
                    f"ID: {m.message_id} | Expiration: {m.expiration} | "
                    f"Subject: {m.subject} | Body: {m.body}"
                )

        if mark:
            for m in resp.messages:
                if not m.is_viewed:
                    client.mark_message_read(m.message_id)
                    logger.debug("Marked message read", message_id=m.message_id)


@app.command()
def send(
    ctx: typer.Context,
    subject: str = typer.Option("Secure Message", "--subject", "-s", help="The message subject"),
    body: str = typer.Option("", "--body", "-b", help="The message body"),
    recipient: Optional[list[str]] = typer.Option(
        None, "--recipient", "-r", help="Message recipient user id (repeatable)"
    ),
    expire_in: str = typer.Option(
        "720h", "--expire-in", "-e", help="Message expiration time from now, e.g. 72h"
    ),
):
    """Send a secure message."""
    if not recipient:
        raise typer.BadParameter("at least one recipient is required", param_hint="--recipient")

    try:
        expire_at = datetime.now() + parse_duration(expire_in)
    except FilelockerError as e:
        raise fail(e) from e

    with session(ctx) as client:
        resp = client.send_message(subject, body, recipient, expire_at)
        print_messages(resp.info_messages)


@app.command("files")
def list_files(ctx: typer.Context):
    """List uploaded files."""
    settings: CliSettings = ctx.obj
    with session(ctx) as client:
        resp = client.list_files()

    if settings.as_json:
        print_json([f.to_dict() for f in resp.files])
        return

    table = Table(title="Files")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Size", justify="right")
    table.add_column("AV scan")
    for f in resp.files:
        table.add_row(f.file_id, f.name, format_size(f.size), "passed" if f.passed_av_scan else "-")
    console.print(table)


@app.command()
def upload(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Remote file name"),
    notes: str = typer.Option("", "--notes", help="File notes"),
    scan: bool = typer.Option(False, "--scan", help="Virus-scan the upload"),
):
    """Upload a file."""
    settings: CliSettings = ctx.obj
    with session(ctx) as client, path.open("rb") as f:
        resp = client.upload_file(name or path.name, f, notes=notes, scan=scan)

    if settings.as_json:
        print_json(resp.file.to_dict() if resp.file else None)
        return
    print_messages(resp.info_messages)
    if resp.file:
        typer.echo(f"Uploaded {resp.file.name} (id {resp.file.file_id})")


@app.command("delete-files")
def delete_files(
    ctx: typer.Context,
    file_ids: list[str] = typer.Argument(..., help="File ids to delete"),
):
    """Delete uploaded files."""
    with session(ctx) as client:
        resp = client.delete_files(file_ids)
    print_messages(resp.info_messages)


@app.command("delete-messages")
def delete_messages(
    ctx: typer.Context,
    message_ids: list[int] = typer.Argument(..., help="Secure message ids to delete"),
):
    """Delete secure messages."""
    with session(ctx) as client:
        resp = client.delete_messages(message_ids)
    print_messages(resp.info_messages)


@app.command()
def groups(ctx: typer.Context):
    """List your groups."""
    settings: CliSettings = ctx.obj
    with session(ctx) as client:
        resp = client.list_groups()

    if settings.as_json:
        print_json([g.to_dict() for g in resp.groups])
        return

    table = Table(title="Groups")
    table.add_column("ID")
    table.add_column("Name")
    for g in resp.groups:
        table.add_row(g.group_id, g.name)
    console.print(table)


@app.command()
def version():
    """Show the client version."""
    typer.echo(f"filelocker {__version__}")


if __name__ == "__main__":
    app()
