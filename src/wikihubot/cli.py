"""
CLI — operator tools for wikihubot.

Commands:
    wikihubot init       — Interactive setup
    wikihubot config     — Show the loaded configuration
    wikihubot test       — Post a test message to the webhook
    wikihubot preview    — Render events from a file without sending
    wikihubot replay     — Dispatch events from a file to the webhook
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from wikihubot import __version__

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "config_path", type=click.Path(path_type=Path), default=None,
              help="Config file (default: ~/.wikihubot/config.yaml)")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """wikihubot — wiki change notifications for Hubot."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"config_path": config_path}


def _load(ctx: click.Context):
    from wikihubot.core import load_config

    return load_config(ctx.obj.get("config_path"))


# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------


@main.command()
@click.pass_context
def init(ctx: click.Context) -> None:
    """Interactive setup — webhook, room and wiki URLs."""
    from wikihubot.core import save_config
    from wikihubot.notifications.config import HubotConfig, WikiUrls

    current = _load(ctx)
    console.print("\n[bold green]wikihubot setup[/bold green]\n")

    webhook_url = Prompt.ask("  Hubot webhook URL", default=current.webhook_url)
    room_name = Prompt.ask("  Room", default=current.room_name)
    transport = Prompt.ask(
        "  Transport",
        choices=["http_client", "buffered_stream"],
        default=current.transport.value,
    )
    wiki_url = Prompt.ask("  Wiki URL (with trailing /)", default=current.urls.wiki_url)
    script_path = Prompt.ask("  Script path", default=current.urls.script_path)

    config = HubotConfig(
        webhook_url=webhook_url,
        room_name=room_name,
        transport=transport,
        timeout=current.timeout,
        legacy_quotes=current.legacy_quotes,
        urls=WikiUrls(
            **{**current.urls.model_dump(), "wiki_url": wiki_url, "script_path": script_path}
        ),
        events=current.events,
    )
    saved = save_config(config, ctx.obj.get("config_path"))

    console.print(f"\n[green]>[/green] Config saved to {saved}")
    console.print("[green]>[/green] Try: [bold]wikihubot test[/bold]\n")


@main.command(name="config")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Show the webhook settings and which events are announced."""
    config = _load(ctx)

    if not config.webhook_url:
        console.print("[yellow]No webhook URL configured. Run 'wikihubot init'.[/yellow]")

    console.print(f"\n[bold]Webhook:[/bold] {config.webhook_url or '-'}")
    console.print(f"[bold]Room:[/bold] {config.room_name or '-'}")
    console.print(f"[bold]Transport:[/bold] {config.transport.value} (timeout {config.timeout}s)")
    console.print(f"[bold]Wiki:[/bold] {config.urls.base or '-'}\n")

    table = Table(title="Events")
    table.add_column("Toggle")
    table.add_column("Status")
    for name, enabled in config.events.model_dump().items():
        table.add_row(name, "[green]on[/green]" if enabled else "[red]off[/red]")
    console.print(table)


# ---------------------------------------------------------------------------
# Delivery
# ---------------------------------------------------------------------------


@main.command()
@click.option("--message", "-m", default="wikihubot test notification", help="Text to post")
@click.pass_context
def test(ctx: click.Context, message: str) -> None:
    """Post a test message straight to the configured webhook."""
    from wikihubot.notifications.errors import ConfigurationMissingError, DeliveryError
    from wikihubot.notifications.payload import encode
    from wikihubot.notifications.transports import build_transport

    config = _load(ctx)

    async def _test() -> int:
        if not config.webhook_url:
            raise ConfigurationMissingError("webhook_url is not set")
        transport = build_transport(config.transport, config.timeout)
        payload = encode(message, config.room_name, legacy_quotes=config.legacy_quotes)
        return await transport.deliver(config.webhook_url, payload)

    try:
        status = asyncio.run(_test())
    except ConfigurationMissingError:
        console.print("[red]Error: No webhook URL. Run 'wikihubot init' first.[/red]")
        sys.exit(1)
    except DeliveryError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        sys.exit(1)

    console.print(f"[green]>[/green] Posted test message (HTTP {status})")


@main.command()
@click.argument("events_file", type=click.Path(exists=True, path_type=Path))
@click.option("--payload", is_flag=True, help="Print the JSON body instead of the text")
@click.pass_context
def preview(ctx: click.Context, events_file: Path, payload: bool) -> None:
    """Render events from a YAML/JSON file without sending anything."""
    from wikihubot.core import load_events
    from wikihubot.notifications.errors import MalformedEventError
    from wikihubot.notifications.formatter import MessageFormatter
    from wikihubot.notifications.payload import encode

    config = _load(ctx)
    try:
        events = load_events(events_file)
    except MalformedEventError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        sys.exit(1)

    formatter = MessageFormatter(config.urls, config.events)
    for event in events:
        message = formatter.format(event)
        if message is None:
            console.print(f"[dim]({event.kind}: skipped)[/dim]")
        elif payload:
            click.echo(encode(message, config.room_name, legacy_quotes=config.legacy_quotes))
        else:
            click.echo(message)


@main.command()
@click.argument("events_file", type=click.Path(exists=True, path_type=Path))
@click.pass_context
def replay(ctx: click.Context, events_file: Path) -> None:
    """Dispatch events from a YAML/JSON file to the webhook."""
    from wikihubot.core import load_events
    from wikihubot.notifications.dispatcher import Dispatcher
    from wikihubot.notifications.errors import MalformedEventError
    from wikihubot.notifications.transport import DeliveryResult

    config = _load(ctx)
    if not config.webhook_url:
        console.print("[red]Error: No webhook URL. Run 'wikihubot init' first.[/red]")
        sys.exit(1)

    try:
        events = load_events(events_file)
    except MalformedEventError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        sys.exit(1)

    results: list[DeliveryResult] = []

    async def _replay() -> None:
        async with Dispatcher(config, on_result=results.append) as dispatcher:
            await dispatcher.transport.connect()
            for event in events:
                await dispatcher.dispatch(event)

    asyncio.run(_replay())

    delivered = sum(1 for r in results if r.ok)
    failed = len(results) - delivered
    console.print(
        f"[green]>[/green] {len(events)} events, {delivered} delivered, "
        f"{failed} failed, {len(events) - len(results)} skipped"
    )
    if failed:
        sys.exit(1)
