"""Read/write access to the store file.

The only code that touches the store on disk. Problems with the store path
(a directory, unreadable, unwritable) are logged as warnings and abort the
operation: read() returns None, write() returns False, nothing is raised.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path

from recents.store.codec import RecordSet, decode, encode, repair

logger = logging.getLogger(__name__)


class StoreFile:
    """Whole-file reads and atomic whole-file replacements of one store."""

    def __init__(self, path: Path, mode: int | None = 0o666) -> None:
        self.path = Path(path)
        self.mode = mode

    def check(self) -> str | None:
        """Describe why the store cannot be used, or None if it can."""
        if self.path.is_dir():
            return f"store path {self.path} is a directory"
        if self.path.exists():
            if not os.access(self.path, os.R_OK):
                return f"store file {self.path} is not readable"
            if not os.access(self.path, os.W_OK):
                return f"store file {self.path} is not writable"
        return None

    def read(self) -> RecordSet | None:
        problem = self.check()
        if problem:
            logger.warning("Cannot read recents store: %s", problem)
            return None
        if not self.path.exists():
            logger.info("Creating recents store at %s", self.path)
            if not self.write(repair({})):
                return None
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            logger.warning("Cannot read recents store %s: %s", self.path, e)
            return None
        return repair(decode(raw))

    def write(self, records: RecordSet) -> bool:
        problem = self.check()
        if problem:
            logger.warning("Cannot write recents store: %s", problem)
            return False
        content = encode(records)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                delete=False,
                dir=str(self.path.parent),
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                encoding="utf-8",
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(content)
                tmp.flush()
                os.fsync(tmp.fileno())
            if self.mode is None and self.path.exists():
                # Keep whatever permissions the existing store has.
                shutil.copymode(self.path, tmp_name)
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.warning("Cannot write recents store %s: %s", self.path, e)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            return False
        self._apply_mode()
        return True

    def _apply_mode(self) -> None:
        """Best-effort chmod; sharing permissions are advisory."""
        if self.mode is None:
            return
        try:
            os.chmod(self.path, self.mode)
        except OSError as e:
            logger.debug("Could not set mode %o on %s: %s", self.mode, self.path, e)
