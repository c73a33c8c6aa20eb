"""Path classification and normalization.

Classification (ignored, remote, VC root) is driven by the patterns and marker
names in PathConfig. Remote paths are never probed on the local filesystem:
their syntax is not a local path and a probe could hang on a network mount.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from recents.config import PathConfig


class PathRules:
    """Classify and formalize paths according to a PathConfig."""

    def __init__(self, config: PathConfig) -> None:
        self.config = config
        self._ignore = [re.compile(p) for p in config.ignore]
        self._remote = [re.compile(p) for p in config.remote]
        self._markers = list(config.vc_markers)

    # ── Classification ───────────────────────────────────────

    def should_ignore(self, path: str) -> bool:
        return any(pattern.search(path) for pattern in self._ignore)

    def is_remote(self, path: str) -> bool:
        return any(pattern.search(path) for pattern in self._remote)

    def exists(self, path: str) -> bool:
        """Remote paths always count as existing."""
        if self.is_remote(path):
            return True
        return os.path.exists(os.path.expanduser(path))

    def is_vc_root(self, directory: str | Path) -> bool:
        d = Path(directory)
        return any((d / marker).exists() for marker in self._markers)

    def find_vc_root(self, start: str) -> str | None:
        """Walk up from start, return the first directory holding a VC marker.

        A file starts the walk at its containing directory. Remote paths and
        walks that reach the filesystem root without a hit return None.
        """
        if self.is_remote(start):
            return None
        p = Path(os.path.abspath(os.path.expanduser(start)))
        if not p.is_dir():
            p = p.parent
        while True:
            if self.is_vc_root(p):
                return self.formalize(str(p))
            if p == p.parent:
                return None
            p = p.parent

    # ── Normalization ────────────────────────────────────────

    def formalize(self, path: str, skip_remote: bool = False) -> str:
        """Absolute form of path, with a single trailing separator for directories."""
        if skip_remote and self.is_remote(path):
            return path
        full = os.path.abspath(os.path.expanduser(path))
        if os.path.isdir(full) and not full.endswith(os.sep):
            full += os.sep
        return full
