"""Configuration: read Warcraft Logs settings from environment.

This module exposes simple helpers used by the client and scripts.
"""
import os

from typing import Any, Dict, Optional


def _get_float(name: str) -> Optional[float]:
	raw = os.getenv(name, "").strip()
	if not raw:
		return None
	try:
		return float(raw)
	except ValueError:
		raise ValueError(f"{name} must be a number of seconds, got {raw!r}")


def get_wcl_config() -> Dict[str, Any]:
	"""Return Warcraft Logs client settings from env.

	`timeout` is None when WARCRAFTLOGS_TIMEOUT is unset, leaving aiohttp's
	default in place.
	"""
	return {
		"api_key": os.getenv("WARCRAFTLOGS_API_KEY", ""),
		"timeout": _get_float("WARCRAFTLOGS_TIMEOUT"),
	}


def get_log_level() -> str:
	return os.getenv("LOG_LEVEL", "INFO").upper()
