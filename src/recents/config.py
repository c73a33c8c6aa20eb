"""Configuration loading from environment variables and recents.toml."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

from recents.categories import DEFAULT_MAX_LENGTHS, Category, parse_category

_DEFAULT_HOME = Path.home() / ".recents"
_CONFIG_FILENAME = "recents.toml"

DEFAULT_STORE_MODE = 0o666

# Editor backups, autosaves, lock files and commit message buffers.
DEFAULT_IGNORE_PATTERNS = [
    r"~$",
    r"/#[^/]*#$",
    r"/\.#[^/]*$",
    r"/\.git/COMMIT_EDITMSG$",
]

# Host-prefixed paths (/ssh:host:/path, /docker:box:/srv) and URLs (sftp://host/path).
DEFAULT_REMOTE_PATTERNS = [
    r"^/[^/:|]+:",
    r"^[A-Za-z][A-Za-z0-9+.-]*://",
]

DEFAULT_VC_MARKERS = [".git", ".hg", ".svn", ".bzr", "_darcs"]


@dataclass
class LimitsConfig:
    """Maximum length of each category's list."""

    max_lengths: dict[Category, int] = field(default_factory=lambda: dict(DEFAULT_MAX_LENGTHS))

    def __post_init__(self) -> None:
        # Categories left out keep their default maximum.
        self.max_lengths = {**DEFAULT_MAX_LENGTHS, **self.max_lengths}

    def __getitem__(self, category: Category) -> int:
        return self.max_lengths[category]


@dataclass
class PathConfig:
    """Path classification rules."""

    ignore: list[str] = field(default_factory=lambda: list(DEFAULT_IGNORE_PATTERNS))
    remote: list[str] = field(default_factory=lambda: list(DEFAULT_REMOTE_PATTERNS))
    vc_markers: list[str] = field(default_factory=lambda: list(DEFAULT_VC_MARKERS))


@dataclass
class StoreConfig:
    """Store file location and advisory permission mode."""

    path: Path = _DEFAULT_HOME / "store.yml"
    mode: int | None = DEFAULT_STORE_MODE


@dataclass
class RecentsConfig:
    """Top-level configuration."""

    limits: LimitsConfig = field(default_factory=LimitsConfig)
    paths: PathConfig = field(default_factory=PathConfig)
    store: StoreConfig = field(default_factory=StoreConfig)
    log_level: str = "INFO"


def _parse_mode(value: int | str | None) -> int | None:
    """Accept 0o664, "0664", "664" or "" (meaning: leave permissions alone)."""
    if value is None or isinstance(value, int):
        return value
    value = value.strip()
    if not value:
        return None
    return int(value, 8)


def _parse_limits(data: dict) -> LimitsConfig:
    max_lengths = dict(DEFAULT_MAX_LENGTHS)
    for name, limit in data.items():
        category = parse_category(name)
        if not isinstance(limit, int) or limit < 0:
            raise ValueError(f"Limit for '{name}' must be a non-negative integer, got {limit!r}")
        max_lengths[category] = limit
    return LimitsConfig(max_lengths=max_lengths)


def _check_patterns(kind: str, patterns: list[str]) -> list[str]:
    for pattern in patterns:
        try:
            re.compile(pattern)
        except re.error as e:
            raise ValueError(f"Invalid {kind} pattern {pattern!r}: {e}") from e
    return list(patterns)


def load_config(config_path: Path | None = None) -> RecentsConfig:
    """Load configuration from environment variables and optional recents.toml.

    Priority: environment variables > recents.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.recents/
        for candidate in [Path.cwd() / _CONFIG_FILENAME, _DEFAULT_HOME / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    store_data = file_data.get("store", {})
    paths_data = file_data.get("paths", {})

    store_path = os.getenv("RECENTS_STORE", store_data.get("path"))
    config = RecentsConfig(
        limits=_parse_limits(file_data.get("limits", {})),
        paths=PathConfig(
            ignore=_check_patterns("ignore", paths_data.get("ignore", DEFAULT_IGNORE_PATTERNS)),
            remote=_check_patterns("remote", paths_data.get("remote", DEFAULT_REMOTE_PATTERNS)),
            vc_markers=list(paths_data.get("vc_markers", DEFAULT_VC_MARKERS)),
        ),
        store=StoreConfig(
            path=Path(store_path).expanduser() if store_path else StoreConfig.path,
            mode=_parse_mode(
                os.getenv("RECENTS_STORE_MODE", store_data.get("mode", DEFAULT_STORE_MODE))
            ),
        ),
        log_level=os.getenv("RECENTS_LOG_LEVEL", file_data.get("log_level", "INFO")),
    )
    return config
