"""
Tests for src.config and src.utils.logging.
"""

import logging
import pathlib
from unittest.mock import patch

import pytest

from src.config import get_log_level, get_wcl_config
from src.utils.logging import LOG_FORMAT, configure_logging, logger


class TestWclConfig:
    def test_defaults(self):
        with patch.dict("os.environ", {"WARCRAFTLOGS_API_KEY": "", "WARCRAFTLOGS_TIMEOUT": ""}):
            cfg = get_wcl_config()
        assert cfg == {"api_key": "", "timeout": None}

    def test_reads_env(self):
        with patch.dict("os.environ", {"WARCRAFTLOGS_API_KEY": "abc", "WARCRAFTLOGS_TIMEOUT": "30"}):
            cfg = get_wcl_config()
        assert cfg == {"api_key": "abc", "timeout": 30.0}

    def test_api_key_read_at_call_time(self):
        with patch.dict("os.environ", {"WARCRAFTLOGS_API_KEY": "first"}):
            assert get_wcl_config()["api_key"] == "first"
        with patch.dict("os.environ", {"WARCRAFTLOGS_API_KEY": "second"}):
            assert get_wcl_config()["api_key"] == "second"

    def test_api_key_missing_from_env(self):
        with patch.dict("os.environ", {}, clear=True):
            assert get_wcl_config()["api_key"] == ""

    def test_bad_timeout(self):
        with patch.dict("os.environ", {"WARCRAFTLOGS_TIMEOUT": "soon"}):
            with pytest.raises(ValueError, match="WARCRAFTLOGS_TIMEOUT"):
                get_wcl_config()


class TestLogging:
    def test_log_level_from_env(self):
        with patch.dict("os.environ", {"LOG_LEVEL": "debug"}):
            assert get_log_level() == "DEBUG"

    def test_library_logger_name(self):
        assert logger.name == "warcraftlogs"

    def test_configure_logging_uses_env_level(self):
        with patch.dict("os.environ", {"LOG_LEVEL": "warning"}):
            with patch.object(logging, "basicConfig") as basic:
                configure_logging()
        basic.assert_called_once_with(level="WARNING", format=LOG_FORMAT)


class TestPackaging:
    def test_project_metadata(self):
        tomllib = pytest.importorskip("tomllib")
        pyproject = pathlib.Path(__file__).resolve().parent.parent / "pyproject.toml"
        project = tomllib.loads(pyproject.read_text(encoding="utf-8"))["project"]

        assert project["name"] == "warcraftlogs-client"
        assert "readme" not in project
        assert any(dep.startswith("aiohttp") for dep in project["dependencies"])
