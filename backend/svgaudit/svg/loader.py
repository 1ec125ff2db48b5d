"""Document loader: raw SVG bytes from disk."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from svgaudit.errors import SourceUnavailable

logger = logging.getLogger(__name__)


def load_document(path: str | os.PathLike[str]) -> bytes:
    """Read the whole document. Raises SourceUnavailable on any OS error."""
    source = str(path)
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        logger.error("File read error for %s: %s", source, e)
        raise SourceUnavailable(f"cannot read document: {e.strerror or e}", source=source) from e
    logger.debug("Read %s, size: %d bytes", source, len(data))
    return data
