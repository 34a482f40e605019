# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Interpreter checks and a system snapshot for diagnostics.

The decoder is pure Python with no native extensions, so the interpreter
version is the one thing worth refusing to start over. The snapshot feeds
the bootstrap log line and `number-words info`.
"""

import platform
import sys
from typing import NamedTuple

MINIMUM_PYTHON = (3, 11)


class SystemInfo(NamedTuple):
    python_version: str
    implementation: str
    platform: str
    architecture: str
    recursion_limit: int


def check_minimum_python() -> None:
    """
    Raises:
        RuntimeError: The running interpreter is older than MINIMUM_PYTHON.
    """
    running = (sys.version_info.major, sys.version_info.minor)
    if running < MINIMUM_PYTHON:
        raise RuntimeError(
            "number_words requires Python >= {}.{}, found {}.{}".format(*MINIMUM_PYTHON, *running)
        )


def get_system_info() -> SystemInfo:
    return SystemInfo(
        python_version=platform.python_version(),
        implementation=platform.python_implementation(),
        platform=platform.platform(terse=True),
        architecture=platform.machine(),
        recursion_limit=sys.getrecursionlimit(),
    )
