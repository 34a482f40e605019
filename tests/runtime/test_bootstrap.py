# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for the runtime bootstrap and environment checks.
"""

import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from number_words.config.schema import GlobalConfig
from number_words.logging.logger import set_log_level
from number_words.parser.base import logger as parser_logger
from number_words.runtime.bootstrap import bootstrap
from number_words.runtime.environment import SystemInfo, check_minimum_python, get_system_info


@pytest.fixture(autouse=True)
def _restore_levels() -> None:
    yield  # type: ignore[misc]
    logging.getLogger("number_words.runtime").handlers.clear()
    set_log_level("INFO")


def test_current_python_passes() -> None:
    check_minimum_python()


def test_old_python_is_rejected() -> None:
    with patch("number_words.runtime.environment.sys") as fake_sys:
        fake_sys.version_info = type(
            "VersionInfo", (tuple,), {"major": 3, "minor": 9}
        )((3, 9, 18))
        with pytest.raises(RuntimeError, match="requires Python >= 3.11"):
            check_minimum_python()


def test_system_info_fields() -> None:
    info = get_system_info()
    assert isinstance(info, SystemInfo)
    assert info.python_version.startswith("3.")


def test_bootstrap_writes_log_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "bootstrap.log"
    bootstrap(GlobalConfig(config_version="1.0.0", log_file=str(log_file)))

    entries = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert entries[0]["msg"] == "number_words bootstrap complete"
    assert entries[0]["project_name"] == "number_words"


def test_bootstrap_applies_log_level() -> None:
    bootstrap(GlobalConfig(config_version="1.0.0", log_level="DEBUG"))
    assert parser_logger.level == logging.DEBUG


def test_bootstrap_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        bootstrap(GlobalConfig(config_version="1.0.0", log_level="CHATTY"))
