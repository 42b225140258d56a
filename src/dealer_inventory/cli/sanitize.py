from __future__ import annotations

import sys
from typing import Sequence

from dealer_inventory.cli.common import error, log
from dealer_inventory.core.errors import InventoryToolError
from dealer_inventory.processing.sanitizer import build_default_sanitizer

USAGE = "Usage: inventory-sanitize <source> <dest1> [dest2] ..."


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        error(USAGE)
        return 1
    source, destinations = args[0], args[1:]
    try:
        build_default_sanitizer(logger=log).run(source, destinations)
    except InventoryToolError as e:
        error(str(e))
        return 1
    except OSError as e:
        error(f"file I/O failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
