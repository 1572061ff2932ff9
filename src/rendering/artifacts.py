"""
Artifact file writing.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

# mkstemp creates files as 0600
ARTIFACT_MODE = 0o644


def write_artifact(directory: Union[str, Path], file_name: str, content: str) -> Path:
    """
    Write a rendered document, creating the directory if needed.

    The content goes to a temporary file in the same directory which then
    replaces the target, so the target path only ever holds a complete file.

    Args:
        directory: Output directory (created if missing)
        file_name: Artifact file name
        content: Document text

    Returns:
        Path: Final file path

    Raises:
        OSError: If the directory cannot be created or the write fails
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / file_name

    fd, tmp_name = tempfile.mkstemp(prefix=f".{file_name}.", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        os.chmod(tmp_name, ARTIFACT_MODE)
        os.replace(tmp_name, target)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise

    logger.debug(f"🗂️  Wrote {len(content)} chars to {target}")
    return target
