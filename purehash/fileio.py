"""File hashing: stream a file through an engine in bounded memory."""

import logging
import os
from typing import Iterator, Optional, Union

from purehash.config import get_settings
from purehash.engine import HashEngine, HashResult
from purehash.errors import HashFileError, InvalidParameterError

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
logger.addHandler(logging.NullHandler())

PathLike = Union[str, bytes, os.PathLike]


def _resolve_chunk_size(chunk_size: Optional[int]) -> int:
    if chunk_size is None:
        return get_settings().file_chunk_size
    if chunk_size <= 0:
        raise InvalidParameterError(f"chunk_size must be positive, got {chunk_size}")
    return chunk_size


def iter_file_chunks(path: PathLike, chunk_size: Optional[int] = None) -> Iterator[bytes]:
    """Yield the contents of `path` in chunks of at most `chunk_size` bytes."""
    chunk_size = _resolve_chunk_size(chunk_size)
    try:
        with open(path, "rb") as f:
            while True:
                chunk = f.read(chunk_size)
                if not chunk:
                    break
                yield chunk
    except OSError as exc:
        name = os.fsdecode(path)
        logger.warning("Cannot read %s: %s", name, exc)
        raise HashFileError(name, exc.strerror or str(exc)) from exc


def update_from_file(
    engine: HashEngine, path: PathLike, chunk_size: Optional[int] = None
) -> int:
    """Feed the whole file into `engine`, returning the number of bytes read."""
    total = 0
    for chunk in iter_file_chunks(path, chunk_size):
        engine.update(chunk)
        total += len(chunk)
    logger.debug("Hashed %d bytes of %s with %s", total, os.fsdecode(path), engine.name)
    return total


def hash_file(
    engine: HashEngine, path: PathLike, chunk_size: Optional[int] = None
) -> HashResult:
    """init -> update(file contents) -> finalize, for an already constructed engine."""
    update_from_file(engine, path, chunk_size)
    return engine.finalize()
