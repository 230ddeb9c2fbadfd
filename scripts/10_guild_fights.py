"""Print the number of fights in a guild's latest Warcraft Logs report.

Usage:
    WARCRAFTLOGS_API_KEY=... python scripts/10_guild_fights.py "carpe cerevisi" moonglade eu
"""
import sys
import asyncio
import argparse
import pathlib

# Small import fallback: if `src` is not importable (e.g., when running
# the script directly in some environments), add project root to `sys.path`.
try:
    import src  # type: ignore
except ModuleNotFoundError:
    root = pathlib.Path(__file__).resolve().parent.parent
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))

from src.utils.logging import configure_logging, logger
from src.warcraftlogs.client import WarcraftLogsClient, WarcraftLogsError
from src.warcraftlogs.endpoints import get_report_fights, get_reports_guild


async def count_latest_fights(client: WarcraftLogsClient, guild: str, server: str, region: str) -> int:
    reports = await get_reports_guild(client, guild, server, region)
    if not reports:
        raise LookupError(f"no reports found for {guild} ({server}-{region})")
    latest = await get_report_fights(client, reports[0]["id"])
    return len(latest["fights"])


def main(argv=None):
    parser = argparse.ArgumentParser(description="Count fights in a guild's latest report")
    parser.add_argument("guild")
    parser.add_argument("server")
    parser.add_argument("region")
    parser.add_argument("--api-key", default=None, help="Overrides WARCRAFTLOGS_API_KEY")
    args = parser.parse_args(argv)

    configure_logging()
    client = WarcraftLogsClient.from_env()
    if args.api_key is not None and not client.set_api_key(args.api_key):
        logger.error("Ignoring blank --api-key")
    if not client.api_key:
        logger.error("No API key: set WARCRAFTLOGS_API_KEY or pass --api-key")
        return 2

    try:
        count = asyncio.run(count_latest_fights(client, args.guild, args.server, args.region))
    except (WarcraftLogsError, LookupError) as exc:
        logger.error("Request failed: %s", exc)
        return 1

    print("Number of fights:", count)
    return 0


if __name__ == "__main__":
    code = main()
    sys.exit(code)
