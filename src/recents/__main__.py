"""Entry point: python -m recents <command>

- push CATEGORY PATH     Record PATH as most recent in CATEGORY
- get CATEGORY           Print CATEGORY's entries, most recent first
- remove CATEGORY PATH   Forget one entry
- clear CATEGORY         Empty CATEGORY
- prune                  Drop vanished entries from every category
- show                   Print every category
- root PATH              Print the version-control root enclosing PATH
- event EVENT PATH       Apply an editor event (file-opened, directory-opened, vc-status-opened)
"""

from __future__ import annotations

import logging
import sys

from recents.categories import CATEGORIES, UnknownCategoryError
from recents.config import load_config


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _usage() -> None:
    print(__doc__.split("\n\n", 1)[1].rstrip(), file=sys.stderr)
    sys.exit(2)


def run(argv: list[str]) -> int:
    if not argv:
        _usage()
    cmd, args = argv[0], argv[1:]

    config = load_config()
    _setup_logging(config.log_level)

    from recents.core import Recents
    from recents.hooks import handle_event

    recents = Recents(config)

    if cmd == "push" and len(args) == 2:
        category = recents.push(args[0], args[1])
        if category:
            print(category)
    elif cmd == "get" and len(args) == 1:
        for path in recents.get(args[0]):
            print(path)
    elif cmd == "remove" and len(args) == 2:
        if not recents.remove(args[0], args[1]):
            return 1
    elif cmd == "clear" and len(args) == 1:
        if not recents.clear(args[0]):
            return 1
    elif cmd == "prune" and not args:
        print(recents.prune())
    elif cmd == "show" and not args:
        records = recents.snapshot()
        for category in CATEGORIES:
            print(f"{category}:")
            for path in records[category]:
                print(f"  {path}")
    elif cmd == "root" and len(args) == 1:
        root = recents.find_vc_root(args[0])
        if not root:
            return 1
        print(root)
    elif cmd == "event" and len(args) == 2:
        try:
            handle_event(recents, args[0], args[1])
        except ValueError:
            print(f"Unknown event '{args[0]}'", file=sys.stderr)
            return 2
    else:
        _usage()
    return 0


def main() -> None:
    try:
        sys.exit(run(sys.argv[1:]))
    except UnknownCategoryError as e:
        print(e, file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
