"""List maintenance over a RecordSet.

All functions are pure: they return a new RecordSet and never modify the one
passed in. Pruning of vanished paths happens in get() rather than push(),
so existence checks are only paid when a list is actually consulted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from recents.categories import Category
from recents.paths import PathRules
from recents.store.codec import RecordSet

logger = logging.getLogger(__name__)


def dedup(paths: Iterable[str]) -> list[str]:
    """Drop repeated entries, keeping the first (most recent) occurrence."""
    seen: set[str] = set()
    result = []
    for path in paths:
        if path not in seen:
            seen.add(path)
            result.append(path)
    return result


def _replace(records: RecordSet, category: Category, paths: list[str]) -> RecordSet:
    updated = dict(records)
    updated[category] = paths
    return updated


def push(
    records: RecordSet,
    category: Category,
    path: str,
    rules: PathRules,
    limits: Mapping[Category, int],
) -> RecordSet:
    """Move path to the front of category, evicting from the tail past the limit.

    Ignored paths leave the RecordSet untouched. Remote paths are stored as
    given; local ones are formalized first.
    """
    if rules.should_ignore(path):
        logger.debug("Ignoring %s", path)
        return records
    path = rules.formalize(path, skip_remote=True)
    current = [p for p in dedup(records[category]) if p != path]
    return _replace(records, category, [path, *current][: limits[category]])


def get(records: RecordSet, category: Category, rules: PathRules) -> tuple[list[str], RecordSet]:
    """Return category's live entries and the RecordSet to persist.

    Ignored and vanished local entries are dropped, survivors are formalized
    again and deduplicated. The RecordSet is returned unchanged when nothing
    was dropped or rewritten.
    """
    original = records[category]
    live = [p for p in original if not rules.should_ignore(p) and rules.exists(p)]
    paths = dedup(rules.formalize(p, skip_remote=True) for p in live)
    if paths == original:
        return list(original), records
    logger.debug("Pruned %s: %d → %d entries", category, len(original), len(paths))
    return paths, _replace(records, category, paths)


def clear(records: RecordSet, category: Category) -> RecordSet:
    return _replace(records, category, [])


def remove(records: RecordSet, category: Category, path: str, rules: PathRules) -> RecordSet:
    """Drop path from category. Unknown paths leave the RecordSet untouched."""
    original = records[category]
    targets = {path, rules.formalize(path, skip_remote=True)}
    paths = [p for p in original if p not in targets]
    if len(paths) == len(original):
        return records
    return _replace(records, category, paths)


def prune(records: RecordSet, rules: PathRules) -> tuple[int, RecordSet]:
    """Apply get()'s pruning to every category. Returns (entries dropped, records)."""
    dropped = 0
    for category in list(records):
        before = len(records[category])
        paths, records = get(records, category, rules)
        dropped += before - len(paths)
    return dropped, records
