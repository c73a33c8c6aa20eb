"""Recently used files, directories and projects, persisted to one shared store file.

Layout:
    ~/.recents/
    ├── recents.toml                   # Optional configuration
    └── store.yml                      # The store: six category lists, most recent first

Every operation reads the whole store and, when it changes something, replaces
the whole store. Nothing is cached between calls.
"""

from recents.categories import CATEGORIES, Category, UnknownCategoryError
from recents.config import RecentsConfig, load_config
from recents.core import Recents

__all__ = [
    "CATEGORIES",
    "Category",
    "Recents",
    "RecentsConfig",
    "UnknownCategoryError",
    "load_config",
]
