"""Editor event entry point — map editor lifecycle events to recents calls.

Usage (editor hook):
    python -m recents.hooks file-opened /path/to/file

Opening a file or directory records it and, when it lives inside a version
controlled tree, records that tree's root as a project as well. Must stay
fast: one store cycle per push, no background work.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum

from recents.categories import Category
from recents.config import load_config
from recents.core import Recents

logger = logging.getLogger(__name__)


class EditorEvent(str, Enum):
    FILE_OPENED = "file-opened"
    DIRECTORY_OPENED = "directory-opened"
    VC_STATUS_OPENED = "vc-status-opened"


_EVENT_CATEGORY = {
    EditorEvent.FILE_OPENED: Category.FILES,
    EditorEvent.DIRECTORY_OPENED: Category.DIRECTORIES,
    EditorEvent.VC_STATUS_OPENED: Category.PROJECTS,
}


def handle_event(recents: Recents, event: EditorEvent | str, path: str) -> list[Category]:
    """Apply the pushes an editor event implies. Returns the categories written.

    Remote paths are never probed for a VC root, so opening a remote file or
    directory records only that path. Remote projects come from
    vc-status-opened events (or explicit pushes), which record the path itself
    under remote-projects.
    """
    event = EditorEvent(event)
    written = []
    if event is EditorEvent.VC_STATUS_OPENED:
        # Status buffers may be opened from a subdirectory of the checkout.
        targets = [(Category.PROJECTS, recents.find_vc_root(path) or path)]
    else:
        targets = [(_EVENT_CATEGORY[event], path)]
        # Project association: the enclosing VC root, if any, goes under projects.
        root = recents.find_vc_root(path)
        if root:
            targets.append((Category.PROJECTS, root))

    for category, target in targets:
        category = recents.push(category, target)
        if category:
            written.append(category)
    return written


def main() -> None:
    if len(sys.argv) != 3:
        print("Usage: python -m recents.hooks EVENT PATH", file=sys.stderr)
        sys.exit(2)
    try:
        event = EditorEvent(sys.argv[1])
    except ValueError:
        valid = ", ".join(e.value for e in EditorEvent)
        print(f"Unknown event '{sys.argv[1]}'. Valid: {valid}", file=sys.stderr)
        sys.exit(2)
    handle_event(Recents(load_config()), event, sys.argv[2])


if __name__ == "__main__":
    main()
