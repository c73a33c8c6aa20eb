"""Category routing: remote paths go to the remote- counterpart of a category.

This is the only place a category is remapped; engine.push() never looks at
remoteness itself.
"""

from __future__ import annotations

from recents.categories import REMOTE_COUNTERPART, Category
from recents.paths import PathRules


def route_category(category: Category, path: str, rules: PathRules) -> Category:
    if rules.is_remote(path):
        return REMOTE_COUNTERPART[category]
    return category
