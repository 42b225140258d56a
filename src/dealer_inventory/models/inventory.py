from __future__ import annotations

from typing import Dict, TypedDict

# column name -> raw string value, schema defined by the export header
InventoryRow = Dict[str, str]


class ValuationResult(TypedDict):
    wholesale_low: str
    wholesale_high: str
    market_low: str
    market_high: str


CatalogRow = TypedDict(
    "CatalogRow",
    {
        "id": str,
        "title": str,
        "description": str,
        "availability": str,
        "condition": str,
        "price": str,
        "link": str,
        "image_link": str,
        "brand": str,
        "google_product_category": str,
        "fb_product_category": str,
        "quantity_to_sell_on_facebook": str,
        "sale_price": str,
        "sale_price_effective_date": str,
        "item_group_id": str,
        "gender": str,
        "color": str,
        "size": str,
        "age_group": str,
        "material": str,
        "pattern": str,
        "shipping": str,
        "shipping_weight": str,
        "video[0].url": str,
        "video[0].tag[0]": str,
        "gtin": str,
        "product_tags[0]": str,
        "product_tags[1]": str,
        "style[0]": str,
    },
)
