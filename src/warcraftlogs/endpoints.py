"""Thin endpoint wrappers around `WarcraftLogsClient`.

One coroutine per documented v1 resource (https://www.warcraftlogs.com/v1/docs).
Path segments are interpolated as given; `params` is forwarded untouched as
the query-parameter mapping.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from src.warcraftlogs.client import ParamValue, WarcraftLogsClient

Params = Optional[Mapping[str, ParamValue]]


def _encounter_segment(encounter_id: Any) -> str:
    """Return the encounter id as a path segment, refusing anything that is not a whole number."""
    if isinstance(encounter_id, bool):
        raise TypeError(f"encounter_id must be an integer, got {encounter_id!r}")
    if isinstance(encounter_id, int):
        return str(encounter_id)
    if isinstance(encounter_id, float):
        if not encounter_id.is_integer():
            raise ValueError(f"encounter_id must be a whole number, got {encounter_id!r}")
        return str(int(encounter_id))
    if isinstance(encounter_id, str):
        if not (encounter_id.isascii() and encounter_id.isdigit()):
            raise ValueError(f"encounter_id must be digits, got {encounter_id!r}")
        return encounter_id
    raise TypeError(f"encounter_id must be an integer, got {type(encounter_id).__name__}")


async def get_zones(client: WarcraftLogsClient, params: Params = None) -> Any:
    """List the zones (and their encounters) used throughout the API."""
    return await client.request_json("/zones", params)


async def get_classes(client: WarcraftLogsClient, params: Params = None) -> Any:
    """List the playable classes and their specs."""
    return await client.request_json("/classes", params)


async def get_rankings_encounter(client: WarcraftLogsClient, encounter_id: int, params: Params = None) -> Any:
    """Rankings for one encounter, e.g. ``params={"metric": "dps", "difficulty": 5}``."""
    return await client.request_json(f"/rankings/encounter/{_encounter_segment(encounter_id)}", params)


async def get_rankings_character(client: WarcraftLogsClient, character_name: str, server_name: str, server_region: str, params: Params = None) -> Any:
    return await client.request_json(f"/rankings/character/{character_name}/{server_name}/{server_region}", params)


async def get_parses_character(client: WarcraftLogsClient, character_name: str, server_name: str, server_region: str, params: Params = None) -> Any:
    return await client.request_json(f"/parses/character/{character_name}/{server_name}/{server_region}", params)


async def get_reports_guild(client: WarcraftLogsClient, guild_name: str, guild_server: str, guild_region: str, params: Params = None) -> Any:
    """Reports uploaded for a guild, newest first by the service's ordering."""
    return await client.request_json(f"/reports/guild/{guild_name}/{guild_server}/{guild_region}", params)


async def get_reports_user(client: WarcraftLogsClient, user_name: str, params: Params = None) -> Any:
    # No slash before the user name; kept as the published wrapper had it.
    return await client.request_json(f"/reports/user{user_name}", params)


async def get_report_fights(client: WarcraftLogsClient, code: str, params: Params = None) -> Any:
    """Fights and participants of a report."""
    return await client.request_json(f"/report/fights/{code}", params)


async def get_report_events(client: WarcraftLogsClient, code: str, params: Params = None) -> Any:
    """Damage, healing, cast, buff and debuff events of a report."""
    return await client.request_json(f"/report/events/{code}", params)


async def get_report_tables(client: WarcraftLogsClient, view: str, code: str, params: Params = None) -> Any:
    """Table pane data for a report.

    `view` follows the table panes on the site (``summary``, ``damage-done``,
    ``healing``, ...) and is more likely to change than the other resources.
    """
    return await client.request_json(f"/report/tables/{view}/{code}", params)


__all__ = [
    "get_zones",
    "get_classes",
    "get_rankings_encounter",
    "get_rankings_character",
    "get_parses_character",
    "get_reports_guild",
    "get_reports_user",
    "get_report_fights",
    "get_report_events",
    "get_report_tables",
]
