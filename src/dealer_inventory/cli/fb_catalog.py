from __future__ import annotations

import sys
from typing import Sequence

from dealer_inventory.cli.common import error, log
from dealer_inventory.core.config import CATALOG_DEFAULT_INPUT, CATALOG_DEFAULT_OUTPUT, CATALOG_PUBLIC_COPY
from dealer_inventory.core.errors import InventoryToolError
from dealer_inventory.processing.catalog import build_default_converter


def main(argv: Sequence[str] | None = None) -> int:
    """inventory-fb-catalog [inputCSV] [outputCSV]

    Converts the Frazer inventory export into a Facebook catalog_products feed
    (generic product template, not vehicle_offer) and drops a copy under public/.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    input_file = args[0] if len(args) > 0 else CATALOG_DEFAULT_INPUT
    output_file = args[1] if len(args) > 1 else CATALOG_DEFAULT_OUTPUT

    log("Facebook Product Catalog Converter (catalog_products format)")
    log(f"Input:  {input_file}")
    log(f"Output: {output_file}")
    try:
        build_default_converter(logger=log).run(input_file, output_file, CATALOG_PUBLIC_COPY)
    except InventoryToolError as e:
        error(str(e))
        return 1
    except OSError as e:
        error(f"file I/O failed: {e}")
        return 1
    log("Done! Upload inventoryFB.csv to Facebook Commerce Manager.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
