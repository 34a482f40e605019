# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Runtime bootstrap for number_words.

Runs once at the start of every CLI command that has a config:
  1. Validate the interpreter version
  2. Apply the configured log level to every package logger
  3. Initialise the runtime logger (with the optional log file)
  4. Log a startup line with the system info
"""

from pathlib import Path

from number_words.config.schema import GlobalConfig
from number_words.logging.logger import get_logger, set_log_level
from number_words.runtime.environment import check_minimum_python, get_system_info


def bootstrap(config: GlobalConfig) -> None:
    """
    Put the process into a known state before any command work happens.

    Raises:
        RuntimeError: Python is older than the minimum supported version.
        ValueError: config.log_level is not a valid level name.
    """
    check_minimum_python()
    set_log_level(config.log_level)

    log_file = Path(config.log_file) if config.log_file is not None else None
    logger = get_logger("number_words.runtime", log_level=config.log_level, log_file=log_file)

    system_info = get_system_info()
    logger.info(
        "number_words bootstrap complete",
        extra={
            "project_name": config.project_name,
            "python_version": system_info.python_version,
            "platform": system_info.platform,
            "architecture": system_info.architecture,
        },
    )
