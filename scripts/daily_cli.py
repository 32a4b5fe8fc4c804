"""Command-line access to the Daily REST API.

Every command performs one API call and prints the decoded JSON body.

Usage:
    python -m scripts.daily_cli domain
    python -m scripts.daily_cli rooms list --limit 10
    python -m scripts.daily_cli rooms create --name standup --privacy private --property exp=1700000000
    python -m scripts.daily_cli tokens create --room standup --owner --exp 1700000000
    python -m scripts.daily_cli logs --mtg-session-id 3b0d... --include-metrics
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable
from typing import Any

import click
import httpx
from rich.console import Console
from rich.markup import escape

from config.settings import get_settings
from daily.client import DailyClient
from daily.errors import DailyApiError
from observability.logger import setup_logging

console = Console()
err_console = Console(stderr=True)


def _parse_properties(pairs: tuple[str, ...]) -> dict[str, Any]:
    """Turn ``key=value`` pairs into a dict, decoding values as JSON when possible."""
    props: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint="--property")
        try:
            props[key] = json.loads(raw)
        except json.JSONDecodeError:
            props[key] = raw
    return props


def _drop_unset(**kwargs: Any) -> dict[str, Any]:
    return {k: v for k, v in kwargs.items() if v is not None}


def _run(ctx: click.Context, call: Callable[[DailyClient], Awaitable[Any]]) -> None:
    token: str = ctx.obj["token"]

    async def _go() -> Any:
        async with DailyClient(token) as client:
            return await call(client)

    try:
        body = asyncio.run(_go())
    except DailyApiError as e:
        err_console.print(f"[bold red]HTTP {e.status_code}[/bold red] {e.method} {e.path}")
        if isinstance(e.body, (dict, list)):
            err_console.print_json(data=e.body)
        else:
            err_console.print(e.body)
        ctx.exit(1)
    except httpx.TransportError as e:
        err_console.print(f"[bold red]request failed[/bold red] {escape(type(e).__name__)}: {escape(str(e))}")
        ctx.exit(1)
    console.print_json(data=body)


@click.group()
@click.option("--token", envvar="DAILY_API_KEY", help="Daily API key (default: $DAILY_API_KEY).")
@click.option("--log-format", type=click.Choice(["json", "console"]), default=None)
@click.pass_context
def cli(ctx: click.Context, token: str | None, log_format: str | None) -> None:
    """Daily REST API client."""
    settings = get_settings()
    setup_logging(level=settings.log_level, fmt=log_format or settings.log_format)
    token = token or settings.daily_api_key
    if not token:
        raise click.UsageError("no API key: pass --token or set DAILY_API_KEY")
    ctx.ensure_object(dict)
    ctx.obj["token"] = token


@cli.command()
@click.pass_context
def domain(ctx: click.Context) -> None:
    """Show the domain configuration."""
    _run(ctx, lambda c: c.domain_config())


# ── Rooms ───────────────────────────────────────────────────────────────


@cli.group()
def rooms() -> None:
    """Create, inspect and delete rooms."""


@rooms.command("list")
@click.option("--limit", type=int)
@click.option("--starting-after")
@click.option("--ending-before")
@click.pass_context
def rooms_list(ctx: click.Context, limit: int | None, starting_after: str | None, ending_before: str | None) -> None:
    params = _drop_unset(limit=limit, starting_after=starting_after, ending_before=ending_before)
    _run(ctx, lambda c: c.list_rooms(params or None))


@rooms.command("get")
@click.argument("name")
@click.pass_context
def rooms_get(ctx: click.Context, name: str) -> None:
    _run(ctx, lambda c: c.get_room(name))


@rooms.command("create")
@click.option("--name")
@click.option("--privacy", type=click.Choice(["public", "private"]))
@click.option("--property", "properties", multiple=True, help="Room property as key=value; repeatable.")
@click.pass_context
def rooms_create(ctx: click.Context, name: str | None, privacy: str | None, properties: tuple[str, ...]) -> None:
    data = _drop_unset(name=name, privacy=privacy)
    if properties:
        data["properties"] = _parse_properties(properties)
    _run(ctx, lambda c: c.create_room(data))


@rooms.command("update")
@click.argument("name")
@click.option("--privacy", type=click.Choice(["public", "private"]))
@click.option("--property", "properties", multiple=True, help="Room property as key=value; repeatable.")
@click.pass_context
def rooms_update(ctx: click.Context, name: str, privacy: str | None, properties: tuple[str, ...]) -> None:
    data = _drop_unset(privacy=privacy)
    if properties:
        data["properties"] = _parse_properties(properties)
    _run(ctx, lambda c: c.update_room(name, data))


@rooms.command("delete")
@click.argument("name")
@click.pass_context
def rooms_delete(ctx: click.Context, name: str) -> None:
    _run(ctx, lambda c: c.delete_room(name))


# ── Meeting tokens ──────────────────────────────────────────────────────


@cli.group()
def tokens() -> None:
    """Issue and validate meeting tokens."""


@tokens.command("create")
@click.option("--room", "room_name")
@click.option("--user-name")
@click.option("--user-id")
@click.option("--owner/--no-owner", "is_owner", default=None)
@click.option("--nbf", type=int, help="Not valid before (unix seconds).")
@click.option("--exp", type=int, help="Expiry (unix seconds).")
@click.option("--property", "properties", multiple=True, help="Extra token property as key=value; repeatable.")
@click.pass_context
def tokens_create(
    ctx: click.Context,
    room_name: str | None,
    user_name: str | None,
    user_id: str | None,
    is_owner: bool | None,
    nbf: int | None,
    exp: int | None,
    properties: tuple[str, ...],
) -> None:
    props = _drop_unset(
        room_name=room_name,
        user_name=user_name,
        user_id=user_id,
        is_owner=is_owner,
        nbf=nbf,
        exp=exp,
    )
    props.update(_parse_properties(properties))
    _run(ctx, lambda c: c.create_meeting_token({"properties": props}))


@tokens.command("validate")
@click.argument("token")
@click.pass_context
def tokens_validate(ctx: click.Context, token: str) -> None:
    _run(ctx, lambda c: c.meeting_token(token))


# ── Meetings & logs ─────────────────────────────────────────────────────


@cli.command()
@click.option("--room")
@click.option("--timeframe-start", type=int, help="Unix seconds.")
@click.option("--timeframe-end", type=int, help="Unix seconds.")
@click.option("--limit", type=int)
@click.option("--starting-after")
@click.option("--ending-before")
@click.pass_context
def meetings(
    ctx: click.Context,
    room: str | None,
    timeframe_start: int | None,
    timeframe_end: int | None,
    limit: int | None,
    starting_after: str | None,
    ending_before: str | None,
) -> None:
    """List meeting sessions."""
    params = _drop_unset(
        room=room,
        timeframe_start=timeframe_start,
        timeframe_end=timeframe_end,
        limit=limit,
        starting_after=starting_after,
        ending_before=ending_before,
    )
    _run(ctx, lambda c: c.list_meetings(params or None))


@cli.command()
@click.option("--mtg-session-id", "mtgSessionId")
@click.option("--user-session-id", "userSessionId")
@click.option("--include-logs/--no-include-logs", "includeLogs", default=None)
@click.option("--include-metrics/--no-include-metrics", "includeMetrics", default=None)
@click.option("--level", "logLevel", type=click.Choice(["ERROR", "INFO", "DEBUG"]))
@click.option("--order", type=click.Choice(["ASC", "DESC"], case_sensitive=False))
@click.option("--start-time", "startTime", type=int, help="Epoch milliseconds.")
@click.option("--end-time", "endTime", type=int, help="Epoch milliseconds.")
@click.option("--limit", type=int)
@click.option("--offset", type=int)
@click.pass_context
def logs(ctx: click.Context, **filters: Any) -> None:
    """Fetch call logs and metrics for a session or participant."""
    params = _drop_unset(**filters)
    if "mtgSessionId" not in params and "userSessionId" not in params:
        raise click.UsageError("pass --mtg-session-id or --user-session-id")
    _run(ctx, lambda c: c.logs(params))


if __name__ == "__main__":
    cli()
