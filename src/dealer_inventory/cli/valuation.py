from __future__ import annotations

import sys
from typing import Sequence

from dealer_inventory.cli.common import error, log
from dealer_inventory.core.config import VALUATION_DEFAULT_INPUT, VALUATION_DEFAULT_OUTPUT
from dealer_inventory.core.errors import InventoryToolError
from dealer_inventory.processing.valuation import build_default_enricher


def main(argv: Sequence[str] | None = None) -> int:
    """inventory-valuation [inputCSV] [outputCSV]"""
    args = list(sys.argv[1:] if argv is None else argv)
    input_file = args[0] if len(args) > 0 else VALUATION_DEFAULT_INPUT
    output_file = args[1] if len(args) > 1 else VALUATION_DEFAULT_OUTPUT
    try:
        enricher = build_default_enricher(logger=log)
        log(f"Starting Cloud Valuation: {input_file}")
        enricher.run(input_file, output_file)
    except InventoryToolError as e:
        error(str(e))
        return 1
    except OSError as e:
        error(f"file I/O failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
