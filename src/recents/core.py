"""Recents facade: the operations editor integrations call.

Each public method is one unit of work against the store file:
1. Read the whole store (created on first use)
2. Route the category (push only) and apply the list operation
3. Write the whole store back, only if something changed

No RecordSet is kept between calls, so several processes can share one store.
Two processes pushing at the same moment can lose one of the two updates
(last write wins); the store itself is never left half-written.
"""

from __future__ import annotations

import logging

from recents import engine
from recents.categories import CATEGORIES, Category, parse_category
from recents.config import RecentsConfig
from recents.paths import PathRules
from recents.router import route_category
from recents.store import RecordSet, StoreFile

logger = logging.getLogger(__name__)


class Recents:
    """Push, read and clear recency lists backed by a shared store file."""

    def __init__(self, config: RecentsConfig) -> None:
        self.config = config
        self.rules = PathRules(config.paths)
        self.store = StoreFile(config.store.path, config.store.mode)

    # ── List operations ──────────────────────────────────────

    def push(self, category: Category | str, path: str) -> Category | None:
        """Record path as the most recent entry of category.

        Remote paths land in the remote- counterpart of category. Returns the
        category written to, or None when the path was ignored, was not kept
        (a limit of 0) or the store could not be used.
        """
        category = route_category(parse_category(category), path, self.rules)
        records = self.store.read()
        if records is None:
            return None
        updated = engine.push(
            records, category, path, self.rules, self.config.limits.max_lengths
        )
        if updated is records:
            return None
        if updated != records and not self.store.write(updated):
            return None
        if not updated[category]:
            # A zero limit keeps nothing.
            return None
        return category

    def get(self, category: Category | str) -> list[str]:
        """Current entries of category, most recent first.

        Vanished local paths are pruned here and the pruned list is persisted.
        """
        category = parse_category(category)
        records = self.store.read()
        if records is None:
            return []
        paths, updated = engine.get(records, category, self.rules)
        if updated is not records:
            self.store.write(updated)
        return paths

    def clear(self, category: Category | str) -> bool:
        category = parse_category(category)
        records = self.store.read()
        if records is None:
            return False
        if not self.store.write(engine.clear(records, category)):
            return False
        logger.info("Cleared %s", category)
        return True

    def remove(self, category: Category | str, path: str) -> bool:
        """Forget a single entry. Returns True if it was present."""
        category = parse_category(category)
        records = self.store.read()
        if records is None:
            return False
        updated = engine.remove(records, category, path, self.rules)
        if updated is records:
            return False
        return self.store.write(updated)

    def prune(self) -> int:
        """Drop ignored and vanished entries from every category in one pass."""
        records = self.store.read()
        if records is None:
            return 0
        dropped, updated = engine.prune(records, self.rules)
        if updated is not records:
            self.store.write(updated)
        if dropped:
            logger.info("Pruned %d stale entries", dropped)
        return dropped

    def snapshot(self) -> RecordSet:
        """Pruned view of all categories, read and persisted in one cycle."""
        records = self.store.read()
        if records is None:
            return {category: [] for category in CATEGORIES}
        _, updated = engine.prune(records, self.rules)
        if updated is not records:
            self.store.write(updated)
        return updated

    # ── Path classification ──────────────────────────────────

    def find_vc_root(self, path: str) -> str | None:
        return self.rules.find_vc_root(path)

    def is_remote(self, path: str) -> bool:
        return self.rules.is_remote(path)
