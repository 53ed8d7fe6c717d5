"""Configuration defaults and environment overrides for fastabuf."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import find_dotenv, load_dotenv

HEADER_MARKER = ">"
COMMENT_MARKER = ";"

# Canonical output width; the original fasta tool wraps sequences at 80 columns.
DEFAULT_WRAP_WIDTH = 80
DEFAULT_ENCODING = "utf-8"

ENVIRONMENT_VARIABLES = (
    "FASTABUF_WRAP_WIDTH",
    "FASTABUF_ENCODING",
    "FASTABUF_SKIP_COMMENTS",
)

PathLike = Union[str, Path]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class FastaConfig:
    """Settings shared by the parser and the writer."""

    wrap_width: int = DEFAULT_WRAP_WIDTH
    encoding: str = DEFAULT_ENCODING
    skip_comments: bool = False

    def __post_init__(self) -> None:
        if self.wrap_width < 1:
            raise ValueError(f"wrap_width must be positive, got {self.wrap_width}")
        if not self.encoding:
            raise ValueError("encoding must not be empty")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "FastaConfig":
        """Build a config from FASTABUF_* variables, falling back to defaults."""
        env = os.environ if env is None else env
        config = cls()

        raw_width = env.get("FASTABUF_WRAP_WIDTH")
        if raw_width:
            try:
                width = int(raw_width)
            except ValueError as exc:
                raise ValueError(f"FASTABUF_WRAP_WIDTH must be an integer, got {raw_width!r}") from exc
            config = replace(config, wrap_width=width)

        encoding = env.get("FASTABUF_ENCODING")
        if encoding:
            config = replace(config, encoding=encoding.strip())

        raw_skip = env.get("FASTABUF_SKIP_COMMENTS")
        if raw_skip:
            config = replace(config, skip_comments=_parse_bool("FASTABUF_SKIP_COMMENTS", raw_skip))

        return config

    def as_dict(self) -> dict:
        return {
            "FASTABUF_WRAP_WIDTH": str(self.wrap_width),
            "FASTABUF_ENCODING": self.encoding,
            "FASTABUF_SKIP_COMMENTS": "1" if self.skip_comments else "0",
        }


def find_env_file(start_path: Optional[PathLike] = None) -> Optional[Path]:
    """Return the closest .env file above start_path (or the CWD), if any."""
    if start_path is None:
        found = find_dotenv(usecwd=True)
        return Path(found) if found else None

    current = Path(start_path).resolve()
    for candidate_dir in (current, *current.parents):
        candidate = candidate_dir / ".env"
        if candidate.is_file():
            return candidate
    return None


def load_config(start_path: Optional[PathLike] = None) -> FastaConfig:
    """Source the nearest .env file without overriding existing values, then read the environment."""
    env_path = find_env_file(start_path)
    if env_path is not None:
        load_dotenv(env_path, override=False)
    return FastaConfig.from_env()


@lru_cache(maxsize=1)
def get_default_config() -> FastaConfig:
    """Process-wide config used when callers do not pass one.

    Sources the nearest .env file on first use; later changes to the
    environment are not seen until `get_default_config.cache_clear()`.
    """
    return load_config()


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {value!r}")
