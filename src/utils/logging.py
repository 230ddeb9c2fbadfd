"""Simple logging helper for the client and scripts."""

import logging
from typing import Optional


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None):
	"""Install the basic handler. Called by scripts, never by library code."""
	if level is None:
		from src.config import get_log_level

		level = get_log_level()
	logging.basicConfig(level=level, format=LOG_FORMAT)


def get_logger(name: str = "warcraftlogs"):
	return logging.getLogger(name)


logger = get_logger()
