"""Persisting rendered documents to disk."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from tsungforge._internal.errors import EngineError
from tsungforge._internal.logging import get_logger

logger = get_logger("engine.writer")

FILE_PREFIX = "tsung_"
FILE_SUFFIX = ".xml"


def write_document(xml: str, directory: str | Path | None = None) -> Path:
    """Write *xml* verbatim to a new ``tsung_*.xml`` temporary file.

    The file is not deleted afterwards; Tsung reads it after this returns.

    Args:
        xml: Document text, written unchanged as UTF-8.
        directory: Where to create the file. Defaults to the system
            temporary directory.

    Returns:
        Path of the written file.

    Raises:
        EngineError: If the file cannot be created or written.
    """
    try:
        fd, name = tempfile.mkstemp(
            prefix=FILE_PREFIX,
            suffix=FILE_SUFFIX,
            dir=str(directory) if directory is not None else None,
        )
    except OSError as exc:
        msg = f"Could not create a temporary file: {exc}"
        raise EngineError(msg) from exc

    path = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(xml)
    except OSError as exc:
        path.unlink(missing_ok=True)
        msg = f"Could not write to temporary file {path}: {exc}"
        raise EngineError(msg) from exc

    logger.info("Wrote XML file to: %s", path)
    return path


def write_document_to(xml: str, target: str | Path) -> Path:
    """Write *xml* verbatim to *target*, creating parent directories.

    Raises:
        EngineError: If the file cannot be written.
    """
    path = Path(target)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(xml, encoding="utf-8", newline="")
    except OSError as exc:
        msg = f"Could not write {path}: {exc}"
        raise EngineError(msg) from exc

    logger.info("Wrote XML file to: %s", path)
    return path
