"""Address file: a JSON array of asset ids written by the collector, read by the registrar."""

from __future__ import annotations

import json
import os
from pathlib import Path

from creator_watch.errors import FileError
from creator_watch.logging_setup import get_logger

logger = get_logger(__name__)


def save_addresses(path: str | Path, addresses: list[str]) -> Path:
    """
    Overwrite path with addresses as a JSON array (indent 2).
    Written to a sibling temp file first and swapped in, so readers never see half a file.
    """
    p = Path(path)
    tmp = p.with_name(p.name + ".tmp")
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(list(addresses), f, ensure_ascii=False, indent=2)
            f.write("\n")
        os.replace(tmp, p)
    except OSError as e:
        if tmp.is_file():
            tmp.unlink()
        raise FileError(f"cannot write address file {p}: {e}", path=str(p)) from e
    logger.debug("Wrote %s address(es) to %s", len(addresses), p)
    return p


def load_addresses(path: str | Path) -> list[str]:
    """Read the address file back. Missing file, bad JSON or a non-list of strings is a FileError."""
    p = Path(path)
    if not p.is_file():
        raise FileError(f"address file not found: {p}", path=str(p))
    try:
        with open(p, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise FileError(f"cannot read address file {p}: {e}", path=str(p)) from e
    except json.JSONDecodeError as e:
        raise FileError(f"address file {p} is not valid JSON: {e}", path=str(p)) from e
    if not isinstance(data, list):
        raise FileError(f"address file {p} must hold a JSON array, got {type(data).__name__}", path=str(p))
    for index, item in enumerate(data):
        if not isinstance(item, str):
            raise FileError(f"address file {p}: entry {index} is not a string", path=str(p))
    logger.debug("Loaded %s address(es) from %s", len(data), p)
    return data
