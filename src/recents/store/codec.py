"""Encode/decode the store file.

On disk the store is a header comment followed by a YAML mapping from
category name to a list of path strings:

    # recents store: most recently used first. Rewritten on every change.
    files:
    - /home/u/notes.txt
    directories: []
    ...

Decoding never fails: unparsable or wrong-shaped content decodes to an empty
mapping, and repair() restores the six-category shape.
"""

from __future__ import annotations

import logging
from typing import Any

import yaml

from recents.categories import CATEGORIES, Category

logger = logging.getLogger(__name__)

RecordSet = dict[Category, list[str]]

HEADER = "# recents store: most recently used first. Rewritten on every change.\n"

_BY_NAME = {c.value: c for c in CATEGORIES}


def decode(raw: str | bytes) -> dict[Category | str, Any]:
    """Parse store content. Known category names become Category keys."""
    try:
        data = yaml.safe_load(raw)
    except (yaml.YAMLError, RecursionError) as e:
        # Deeply nested input exhausts the recursive composer.
        logger.debug("Unparsable store content, treating as empty: %s", e)
        return {}
    if not isinstance(data, dict):
        return {}
    return {_BY_NAME.get(key, key): value for key, value in data.items()}


def repair(partial: Any) -> RecordSet:
    """Return exactly the six categories, each a list of strings.

    Missing or non-list values become empty lists, non-string elements are
    dropped, unknown keys are not carried over.
    """
    if not isinstance(partial, dict):
        partial = {}
    records: RecordSet = {}
    for category in CATEGORIES:
        value = partial.get(category)
        if not isinstance(value, list):
            value = []
        records[category] = [item for item in value if isinstance(item, str)]
    return records


def encode(records: RecordSet) -> str:
    """Render a RecordSet; categories always appear in the same order."""
    data = {category.value: list(records.get(category, [])) for category in CATEGORIES}
    body = yaml.safe_dump(
        data,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=4096,
    )
    return HEADER + body
