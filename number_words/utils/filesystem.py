# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Atomic file output for number_words.

Reports and decoded result files are written to a temporary file next to
the target and renamed into place. Rename within one directory is atomic on
POSIX, so readers see either the old file or the complete new one.
"""

import tempfile
from pathlib import Path

TEMP_PREFIX = ".number_words_tmp_"


def atomic_write(target_path: Path, content: str, encoding: str = "utf-8") -> None:
    """
    Write `content` to `target_path` atomically, creating parent directories.

    Raises:
        OSError: If the write or rename fails. The temp file is removed first.
    """
    target_path.parent.mkdir(parents=True, exist_ok=True)

    # delete=False: the file has to outlive close() so it can be renamed.
    temp_file = tempfile.NamedTemporaryFile(
        mode="w",
        encoding=encoding,
        dir=str(target_path.parent),
        prefix=TEMP_PREFIX,
        suffix=".tmp",
        delete=False,
    )
    temp_path = Path(temp_file.name)

    try:
        temp_file.write(content)
        temp_file.flush()
        temp_file.close()
        temp_path.replace(target_path)
    except BaseException:
        temp_file.close()
        if temp_path.exists():
            temp_path.unlink()
        raise
