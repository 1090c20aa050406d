"""Atomic file output shared by the CLI and the exporters."""

import logging
import os
import tempfile

logger = logging.getLogger(__name__)


def write_atomic(path, text):
    """Write text to path so that readers see either the old file or the
    complete new one.

    Raises:
        OSError: if the file cannot be written; no partial file is left behind
    """
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
    logger.debug("Wrote %d bytes to %s", len(text), path)
