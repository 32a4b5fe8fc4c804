"""Tests for the daily_cli command group."""

from __future__ import annotations

import json

import httpx
import pytest
from click.testing import CliRunner

from config.settings import Settings
from daily.client import DailyClient
from scripts import daily_cli


@pytest.fixture
def runner(api, monkeypatch) -> CliRunner:
    monkeypatch.setattr(daily_cli, "get_settings", lambda: Settings(_env_file=None, daily_api_key=""))
    monkeypatch.setattr(
        daily_cli,
        "DailyClient",
        lambda token: DailyClient(token, http_transport=httpx.MockTransport(api.handler)),
    )
    return CliRunner()


def test_rooms_delete_prints_body(runner, api):
    api.respond(json={"deleted": True, "name": "r1"})

    result = runner.invoke(daily_cli.cli, ["--token", "tok", "rooms", "delete", "r1"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"deleted": True, "name": "r1"}
    assert api.last.method == "DELETE"
    assert api.last.url.path == "/v1/rooms/r1"
    assert api.last.headers["Authorization"] == "Bearer tok"


def test_rooms_list_passes_cursor(runner, api):
    runner.invoke(daily_cli.cli, ["--token", "tok", "rooms", "list", "--limit", "10", "--starting-after", "abc"])

    assert api.last_params() == {"limit": "10", "starting_after": "abc"}


def test_rooms_create_parses_properties(runner, api):
    result = runner.invoke(
        daily_cli.cli,
        [
            "--token", "tok",
            "rooms", "create",
            "--name", "standup",
            "--privacy", "private",
            "--property", "exp=1700000000",
            "--property", "enable_chat=true",
            "--property", "lang=fr",
        ],
    )

    assert result.exit_code == 0, result.output
    assert api.last_json() == {
        "name": "standup",
        "privacy": "private",
        "properties": {"exp": 1700000000, "enable_chat": True, "lang": "fr"},
    }


def test_tokens_create_builds_properties(runner, api):
    api.respond(json={"token": "abc.def.ghi"})

    result = runner.invoke(
        daily_cli.cli,
        ["--token", "tok", "tokens", "create", "--room", "r1", "--exp", "1700000000", "--owner"],
    )

    assert result.exit_code == 0, result.output
    assert api.last_json() == {"properties": {"room_name": "r1", "is_owner": True, "exp": 1700000000}}
    assert json.loads(result.output) == {"token": "abc.def.ghi"}


def test_logs_requires_a_session_filter(runner, api):
    result = runner.invoke(daily_cli.cli, ["--token", "tok", "logs", "--limit", "5"])

    assert result.exit_code == 2
    assert api.requests == []


def test_logs_forwards_filters(runner, api):
    runner.invoke(
        daily_cli.cli,
        ["--token", "tok", "logs", "--mtg-session-id", "m1", "--include-metrics", "--start-time", "1700000000000"],
    )

    assert api.last_params() == {"mtgSessionId": "m1", "includeMetrics": "true", "startTime": "1700000000000"}


def test_api_error_exits_non_zero(runner, api):
    api.respond(404, json={"error": "not-found"})

    result = runner.invoke(daily_cli.cli, ["--token", "tok", "rooms", "get", "missing"])

    assert result.exit_code == 1
    assert "404" in result.output


def test_missing_token_is_usage_error(runner, api):
    result = runner.invoke(daily_cli.cli, ["domain"], env={"DAILY_API_KEY": ""})

    assert result.exit_code == 2
    assert api.requests == []


def test_domain_shows_config(runner, api):
    api.respond(json={"domainName": "acme", "config": {"lang": "en"}})

    result = runner.invoke(daily_cli.cli, ["--token", "tok", "domain"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"domainName": "acme", "config": {"lang": "en"}}
    assert api.last.method == "GET"
    assert api.last.url.path == "/v1/"


def test_rooms_update_sends_privacy_and_properties(runner, api):
    result = runner.invoke(
        daily_cli.cli,
        ["--token", "tok", "rooms", "update", "r1", "--privacy", "public", "--property", "max_participants=4"],
    )

    assert result.exit_code == 0, result.output
    assert api.last.method == "POST"
    assert api.last.url.path == "/v1/rooms/r1"
    assert api.last_json() == {"privacy": "public", "properties": {"max_participants": 4}}


def test_tokens_validate_puts_token_in_path(runner, api):
    api.respond(json={"room_name": "r1", "is_owner": False})

    result = runner.invoke(daily_cli.cli, ["--token", "tok", "tokens", "validate", "abc.def.ghi"])

    assert result.exit_code == 0, result.output
    assert api.last.method == "GET"
    assert api.last.url.path == "/v1/meeting-tokens/abc.def.ghi"
    assert json.loads(result.output) == {"room_name": "r1", "is_owner": False}


def test_meetings_forwards_filters(runner, api):
    result = runner.invoke(
        daily_cli.cli,
        ["--token", "tok", "meetings", "--room", "standup", "--timeframe-start", "1699990000", "--limit", "5"],
    )

    assert result.exit_code == 0, result.output
    assert api.last.method == "GET"
    assert api.last.url.path == "/v1/meetings"
    assert api.last_params() == {"room": "standup", "timeframe_start": "1699990000", "limit": "5"}


def test_network_failure_exits_with_short_error(runner, api):
    api.fail_with(httpx.ConnectTimeout, "timed out")

    result = runner.invoke(daily_cli.cli, ["--token", "tok", "rooms", "get", "r1"])

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "ConnectTimeout" in result.output
    assert "Traceback" not in result.output
