"""The six recency lists and the local → remote remapping table."""

from __future__ import annotations

from enum import Enum


class UnknownCategoryError(ValueError):
    """Raised when a caller names a category that does not exist."""


class Category(str, Enum):
    FILES = "files"
    DIRECTORIES = "directories"
    PROJECTS = "projects"
    REMOTE_FILES = "remote-files"
    REMOTE_DIRECTORIES = "remote-directories"
    REMOTE_PROJECTS = "remote-projects"

    def __str__(self) -> str:
        return self.value

    @property
    def is_remote(self) -> bool:
        return self in _REMOTE


# Store order; also the order categories are written in.
CATEGORIES: tuple[Category, ...] = tuple(Category)

_REMOTE = frozenset(
    {Category.REMOTE_FILES, Category.REMOTE_DIRECTORIES, Category.REMOTE_PROJECTS}
)

REMOTE_COUNTERPART: dict[Category, Category] = {
    Category.FILES: Category.REMOTE_FILES,
    Category.DIRECTORIES: Category.REMOTE_DIRECTORIES,
    Category.PROJECTS: Category.REMOTE_PROJECTS,
    Category.REMOTE_FILES: Category.REMOTE_FILES,
    Category.REMOTE_DIRECTORIES: Category.REMOTE_DIRECTORIES,
    Category.REMOTE_PROJECTS: Category.REMOTE_PROJECTS,
}

DEFAULT_MAX_LENGTHS: dict[Category, int] = {
    Category.FILES: 150,
    Category.DIRECTORIES: 50,
    Category.PROJECTS: 50,
    Category.REMOTE_FILES: 200,
    Category.REMOTE_DIRECTORIES: 50,
    Category.REMOTE_PROJECTS: 50,
}


def parse_category(name: Category | str) -> Category:
    """Map a category name (e.g. ``"remote-files"``) to its Category.

    Unknown names raise UnknownCategoryError; they are never mapped to a default.
    """
    if isinstance(name, Category):
        return name
    try:
        return Category(name)
    except ValueError:
        valid = ", ".join(c.value for c in CATEGORIES)
        raise UnknownCategoryError(f"Unknown category '{name}'. Valid: {valid}") from None
