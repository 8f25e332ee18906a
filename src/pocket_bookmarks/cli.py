"""CLI interface for pocket-bookmarks.

Commands:
    setup   - Configure Pocket API credentials
    fetch   - Retrieve tagged bookmarks and print or save them
    status  - Show current configuration
"""

import sys
from pathlib import Path

import click
import httpx

from .client import PocketClient
from .config import (
    CONFIG_FILE,
    DEFAULT_HOST,
    AppConfig,
    AuthConfig,
    config_exists,
    load_config,
    save_config,
)
from .converter import bookmarks_to_csv, bookmarks_to_json, sorted_bookmarks
from .errors import PocketError
from .logging_config import setup_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--config", type=click.Path(), default=None, help="Config file path")
@click.pass_context
def main(ctx, verbose, config):
    """Pocket Bookmarks — Retrieve your tagged Pocket bookmarks."""
    setup_logging(debug=verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config) if config else CONFIG_FILE


@main.command()
@click.pass_context
def setup(ctx):
    """Configure Pocket API credentials."""
    config_path = ctx.obj["config_path"]

    click.echo("Pocket Bookmarks — Setup")
    click.echo("=" * 40)
    click.echo()
    click.echo("You need a Pocket consumer key and an access token.")
    click.echo("  1. Create an app at getpocket.com/developer to get a consumer key")
    click.echo("  2. Authorize it for your account to obtain an access token")
    click.echo()

    consumer_key = click.prompt("consumer_key", hide_input=True)
    access_token = click.prompt("access_token", hide_input=True)
    username = click.prompt("username", default="", show_default=False)
    host = click.prompt("host", default=DEFAULT_HOST)

    config = AppConfig(
        auth=AuthConfig(
            consumer_key=consumer_key,
            access_token=access_token,
            username=username,
        ),
        host=host,
    )

    save_config(config, config_path)
    click.echo(f"\nConfig saved to {config_path}")
    click.echo("Run 'pocket-bookmarks fetch' to retrieve your bookmarks.")


@main.command()
@click.option("-o", "--output", type=click.Path(), default=None, help="Output file")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "csv", "json"]),
    default="text",
    show_default=True,
    help="Output format",
)
@click.option(
    "--timeout", type=float, default=None, help="Request timeout in seconds"
)
@click.pass_context
def fetch(ctx, output, output_format, timeout):
    """Retrieve tagged bookmarks from Pocket."""
    config_path = ctx.obj["config_path"]
    if not config_exists(config_path):
        click.echo(
            "Error: No config found. Run 'pocket-bookmarks setup' first.",
            err=True,
        )
        sys.exit(1)

    config = load_config(config_path)
    effective_timeout = timeout if timeout is not None else config.timeout

    click.echo("Fetching bookmarks from Pocket...", err=True)
    try:
        with httpx.Client(follow_redirects=True) as http:
            client = PocketClient.from_config(http, config.client_config())
            bookmarks = client.retrieve(timeout=effective_timeout)
    except PocketError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Retrieved {len(bookmarks)} bookmarks.", err=True)

    if output_format == "csv":
        content = bookmarks_to_csv(bookmarks)
    elif output_format == "json":
        content = bookmarks_to_json(bookmarks)
    else:
        content = "".join(
            f"{b.id}\t{b.title or '(untitled)'}\t{b.url}\n"
            for b in sorted_bookmarks(bookmarks)
        )

    if output:
        output_path = Path(output)
        output_path.write_text(content, encoding="utf-8", newline="")
        click.echo(f"Wrote {len(bookmarks)} bookmarks to {output_path}", err=True)
    else:
        click.echo(content, nl=False)


@main.command()
@click.pass_context
def status(ctx):
    """Show current configuration."""
    config_path = ctx.obj["config_path"]
    has_config = config_exists(config_path)

    click.echo("Pocket Bookmarks — Status")
    click.echo("=" * 40)
    click.echo(f"Config: {'Found' if has_config else 'Not configured'} ({config_path})")

    if not has_config:
        click.echo("\nRun 'pocket-bookmarks setup' to get started.")
        return

    config = load_config(config_path)
    click.echo(f"Host: {config.host}")
    click.echo(f"Username: {config.auth.username or '(not set)'}")
    click.echo(f"Timeout: {config.timeout:g}s")
