"""Table and file fingerprints using xxhash."""

import json
import logging
from pathlib import Path
from typing import Any

import xxhash

logger = logging.getLogger(__name__)


def calculate_file_hash(file_path: Path, chunk_size: int = 8192) -> str:
    """Calculate xxhash for a file.

    Args:
        file_path: Path to the file to hash.
        chunk_size: Size of chunks to read from file (default: 8KB).

    Returns:
        xxhash hex digest as string.

    Raises:
        OSError: If file cannot be read.
    """
    try:
        xxh = xxhash.xxh64()

        with open(file_path, "rb") as f:
            while chunk := f.read(chunk_size):
                xxh.update(chunk)

        return xxh.hexdigest()

    except OSError as e:
        logger.error(f"Failed to calculate hash for {file_path}: {e}")
        raise


def calculate_data_hash(data: Any) -> str:
    """Calculate xxhash of a JSON-serializable structure.

    The structure is dumped with sorted keys and without ASCII escaping, so
    the digest covers the exact UTF-8 bytes of every glyph.

    Args:
        data: JSON-serializable value.

    Returns:
        xxhash hex digest as string.
    """
    canonical = json.dumps(data, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
    return xxhash.xxh64(canonical.encode("utf-8")).hexdigest()
