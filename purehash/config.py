"""Runtime settings for purehash.

Which algorithm families the registry hands out, how files are read, and how
chatty the library logger is. Settings come from code or from the environment:

    PUREHASH_ENABLED     comma separated families (md5, sha1, sha2, keccak)
    PUREHASH_CHUNK_SIZE  bytes per read when hashing files
    PUREHASH_LOG_LEVEL   logging level name for the purehash logger
"""

import logging
import os
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Mapping, Optional

from purehash.errors import InvalidParameterError

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
logger.addHandler(logging.NullHandler())

FAMILIES: FrozenSet[str] = frozenset({"md5", "sha1", "sha2", "keccak"})
DEFAULT_CHUNK_SIZE = 1_048_576
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

ENV_ENABLED = "PUREHASH_ENABLED"
ENV_CHUNK_SIZE = "PUREHASH_CHUNK_SIZE"
ENV_LOG_LEVEL = "PUREHASH_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    """Process-wide purehash settings."""

    enabled_families: FrozenSet[str] = field(default_factory=lambda: FAMILIES)
    file_chunk_size: int = DEFAULT_CHUNK_SIZE
    log_level: str = "WARNING"

    def __post_init__(self):
        unknown = set(self.enabled_families) - FAMILIES
        if unknown:
            raise InvalidParameterError(
                f"unknown algorithm families: {', '.join(sorted(unknown))}"
            )
        if self.file_chunk_size <= 0:
            raise InvalidParameterError(
                f"file_chunk_size must be positive, got {self.file_chunk_size}"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidParameterError(f"unknown log level {self.log_level!r}")
        object.__setattr__(self, "enabled_families", frozenset(self.enabled_families))

    def is_enabled(self, family: str) -> bool:
        return family in self.enabled_families

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from PUREHASH_* environment variables."""
        environ = os.environ if environ is None else environ
        kwargs = {}

        enabled = environ.get(ENV_ENABLED)
        if enabled is not None:
            kwargs["enabled_families"] = frozenset(
                name.strip().lower() for name in enabled.split(",") if name.strip()
            )

        chunk_size = environ.get(ENV_CHUNK_SIZE)
        if chunk_size is not None:
            try:
                kwargs["file_chunk_size"] = int(chunk_size)
            except ValueError as exc:
                raise InvalidParameterError(
                    f"{ENV_CHUNK_SIZE} must be an integer, got {chunk_size!r}"
                ) from exc

        log_level = environ.get(ENV_LOG_LEVEL)
        if log_level is not None:
            kwargs["log_level"] = log_level.strip().upper()

        return cls(**kwargs)

    def with_families(self, *families: str) -> "Settings":
        return replace(self, enabled_families=frozenset(families))


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Current settings, loaded from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
        logger.debug("Loaded settings %s", _settings)
    return _settings


def set_settings(settings: Optional[Settings]) -> None:
    """Replace the current settings; None reloads from the environment."""
    global _settings
    _settings = settings


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Attach a stream handler to the purehash logger."""
    settings = settings or get_settings()
    level = settings.log_level.upper()
    package_logger = logging.getLogger("purehash")
    package_logger.setLevel(level)
    # module loggers sit at DEBUG, so the handler does the filtering
    handlers = [
        h for h in package_logger.handlers if isinstance(h, logging.StreamHandler)
    ]
    if not handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
        package_logger.addHandler(handler)
        handlers = [handler]
    for handler in handlers:
        handler.setLevel(level)
    return package_logger
