"""Content hashing utilities."""

import hashlib
from pathlib import Path


def hash_file(path: str | Path, chunk_size: int = 65536) -> str:
    """
    Hash a file using BLAKE2b.

    Args:
        path: Path to file
        chunk_size: Read chunk size in bytes

    Returns:
        Hash string in format "blake2b:hexdigest"
    """
    h = hashlib.blake2b(digest_size=32)
    path = Path(path)

    with path.open("rb") as f:
        while chunk := f.read(chunk_size):
            h.update(chunk)

    return f"blake2b:{h.hexdigest()}"
