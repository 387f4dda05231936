"""Algorithm lookup by name, filtered by the enabled families."""

import logging
import re
from typing import Callable, Dict, List, NamedTuple, Tuple

from purehash import bits, md5, sha1, sha2, sha3
from purehash.config import get_settings
from purehash.engine import HashEngine
from purehash.errors import InvalidParameterError

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
logger.addHandler(logging.NullHandler())


class Algorithm(NamedTuple):
    family: str
    factory: Callable[..., HashEngine]
    params: Tuple[str, ...] = ()


ALGORITHMS: Dict[str, Algorithm] = {
    "md5": Algorithm("md5", md5.Md5),
    "sha1": Algorithm("sha1", sha1.Sha1),
    "sha224": Algorithm("sha2", sha2.Sha224),
    "sha256": Algorithm("sha2", sha2.Sha256),
    "sha384": Algorithm("sha2", sha2.Sha384),
    "sha512": Algorithm("sha2", sha2.Sha512),
    "sha512_224": Algorithm("sha2", sha2.Sha512_224),
    "sha512_256": Algorithm("sha2", sha2.Sha512_256),
    "sha512t": Algorithm("sha2", sha2.Sha512T, ("t",)),
    "sha3_224": Algorithm("keccak", sha3.Sha3_224),
    "sha3_256": Algorithm("keccak", sha3.Sha3_256),
    "sha3_384": Algorithm("keccak", sha3.Sha3_384),
    "sha3_512": Algorithm("keccak", sha3.Sha3_512),
    "shake128": Algorithm("keccak", sha3.Shake128, ("length",)),
    "shake256": Algorithm("keccak", sha3.Shake256, ("length",)),
}


def normalize_name(name: str) -> str:
    """Canonical registry key: "SHA-512/256" -> "sha512_256", "SHA3-256" -> "sha3_256"."""
    key = re.sub(r"[-/]", "_", name.strip().lower())
    if key.startswith("sha_"):
        key = "sha" + key[4:]
    if key == "sha512_t":
        key = "sha512t"
    return key


def algorithms_available() -> List[str]:
    """Names new() accepts under the current settings."""
    settings = get_settings()
    return sorted(
        name for name, algorithm in ALGORITHMS.items() if settings.is_enabled(algorithm.family)
    )


def new(name: str, data: bits.BytesLike = b"", **params) -> HashEngine:
    """Construct an engine by name, e.g. new("sha512t", t=200) or new("shake128", length=64)."""
    key = normalize_name(name)
    algorithm = ALGORITHMS.get(key)
    if algorithm is None:
        raise InvalidParameterError(f"unsupported hash type {name!r}")
    if not get_settings().is_enabled(algorithm.family):
        raise InvalidParameterError(
            f"hash type {name!r} is disabled (family {algorithm.family!r} not enabled)"
        )

    missing = [p for p in algorithm.params if p not in params]
    if missing:
        raise InvalidParameterError(f"{key} requires parameter(s): {', '.join(missing)}")
    unexpected = sorted(set(params) - set(algorithm.params))
    if unexpected:
        raise InvalidParameterError(f"{key} got unexpected parameter(s): {', '.join(unexpected)}")

    args = [params[p] for p in algorithm.params]
    logger.debug("Creating %s engine with %s", key, params or "no parameters")
    return algorithm.factory(*args, data)
