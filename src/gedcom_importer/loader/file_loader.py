from __future__ import annotations

from pathlib import Path
from typing import Union

from gedcom_importer.core.exceptions import ImportFileError
from gedcom_importer.logging import get_logger

log = get_logger(__name__)


def load_file(path: Union[str, Path]) -> str:
    """
    Read a GEDCOM file as text.

    Raises:
        ImportFileError: if the file does not exist or cannot be read.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise ImportFileError(f"File not found: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8", errors="replace", newline="") as f:
            content = f.read()
    except OSError as exc:
        raise ImportFileError(f"Could not read file: {file_path} ({exc})") from exc

    log.info("Loaded file: %s (%d chars)", file_path, len(content))
    return content
