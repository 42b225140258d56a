from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Sequence

from dealer_inventory.core.config import CatalogConfig
from dealer_inventory.core.constants import (
    COL_COMMENTS,
    COL_EXTERIOR_COLOR,
    COL_IMAGE_URL,
    COL_MAKE,
    COL_MILEAGE,
    COL_MODEL,
    COL_OPTION_LIST,
    COL_RETAIL,
    COL_STOCK_NUMBER,
    COL_TRIM,
    COL_TYPE,
    COL_VIN,
    COL_YEAR,
    COL_YOUTUBE_URL,
    FB_AVAILABILITY,
    FB_CATALOG_HEADERS,
    FB_CONDITION,
    FB_GOOGLE_PRODUCT_CATEGORY,
    FB_PRODUCT_CATEGORY,
    FB_VIDEO_TAG,
    MILEAGE_PLACEHOLDER,
    MIN_COMMENT_CHARS,
    OPTION_PLACEHOLDER,
    PRICE_CURRENCY,
)
from dealer_inventory.core.errors import EmptyInputError, MissingInputError
from dealer_inventory.export.writers import read_text, render_catalog_csv, write_text
from dealer_inventory.models import CatalogRow
from dealer_inventory.processing.types import LogFunc
from dealer_inventory.utils import (
    clean_price,
    collapse_ws,
    format_miles,
    format_price,
    parse_csv_line,
    parse_leading_int,
    split_csv_lines,
    strip_newlines,
    truncate,
)

_BULLET_RE = re.compile(r"\*\s*")

SKIP_MISSING_IDENTITY = "Missing make, model or VIN"
SKIP_NO_PRICE = "No retail price"
SKIP_NO_IMAGES = "No images"


def build_title(year: str, make: str, model: str, trim: str) -> str:
    return f"{year} {make} {model}{' ' + trim if trim else ''}".strip()


def _vehicle_details(mileage: str, ext_color: str) -> list[str]:
    details: list[str] = []
    miles = parse_leading_int(mileage)
    if mileage and mileage != MILEAGE_PLACEHOLDER and miles is not None and miles > 0:
        details.append(format_miles(mileage))
    if ext_color:
        details.append(f"{ext_color} exterior")
    return details


def _format_features(option_list: str) -> str:
    # "Air Conditioning; Power Windows; Available" -> "Air Conditioning, Power Windows"
    if not option_list or not option_list.strip():
        return ""
    features = [f.strip() for f in option_list.split(";")]
    features = [f for f in features if f and f != OPTION_PLACEHOLDER]
    return ", ".join(features)


def build_description(
    *,
    comments: str,
    title: str,
    mileage: str,
    ext_color: str,
    option_list: str,
    contact_footer: str,
    max_chars: int,
) -> str:
    """Single-line listing text.

    Short or missing comments are replaced by a synthesized blurb ending in the
    dealer contact footer. Frazer ``*`` bullets become `` | `` separators. The
    option list is appended as a feature list. The result never contains a line
    break and is cut to ``max_chars`` plus ``...``.
    """
    details = _vehicle_details(mileage, ext_color)
    if not comments or len(comments.strip()) < MIN_COMMENT_CHARS:
        desc = ". ".join([title] + details) + f". {contact_footer}"
    else:
        body = collapse_ws(_BULLET_RE.sub(" | ", comments)).strip()
        lead = f"{title} - {', '.join(details)}" if details else title
        desc = f"{lead}. {body}"

    features = _format_features(option_list)
    if features:
        desc += f" | Features: {features}"

    desc = collapse_ws(strip_newlines(desc)).strip()
    return truncate(desc, max_chars)


@dataclass
class ConversionResult:
    rows: list[CatalogRow] = field(default_factory=list)
    skipped: int = 0
    skip_reasons: dict[str, int] = field(default_factory=dict)

    def add_skip(self, reason: str) -> None:
        self.skipped += 1
        self.skip_reasons[reason] = self.skip_reasons.get(reason, 0) + 1


class CatalogConverter:
    def __init__(
        self,
        *,
        config: CatalogConfig,
        logger: LogFunc,
        headers: Sequence[str] = FB_CATALOG_HEADERS,
    ) -> None:
        self._config = config
        self._log = logger
        self._headers = tuple(headers)

    def convert_row(self, row: dict[str, str]) -> tuple[CatalogRow | None, str]:
        """Map one export row; returns (row, "") or (None, skip reason)."""
        vin = row.get(COL_VIN, "")
        make = row.get(COL_MAKE, "")
        model = row.get(COL_MODEL, "")
        trim = row.get(COL_TRIM, "")
        year = row.get(COL_YEAR, "")
        stock_num = row.get(COL_STOCK_NUMBER, "")
        mileage = row.get(COL_MILEAGE, "")
        ext_color = row.get(COL_EXTERIOR_COLOR, "")
        youtube_url = row.get(COL_YOUTUBE_URL, "")

        if not make or not model or not vin:
            return None, SKIP_MISSING_IDENTITY

        retail = clean_price(row.get(COL_RETAIL, ""))
        if retail <= 0:
            return None, SKIP_NO_PRICE

        image_field = row.get(COL_IMAGE_URL, "")
        # blank entries are dropped, the kept URL is emitted as written
        images = [u for u in image_field.split("|") if u.strip()] if image_field else []
        if not images:
            return None, SKIP_NO_IMAGES

        title = build_title(year, make, model, trim)
        description = build_description(
            comments=row.get(COL_COMMENTS, ""),
            title=title,
            mileage=mileage,
            ext_color=ext_color,
            option_list=row.get(COL_OPTION_LIST, ""),
            contact_footer=self._config.contact_footer,
            max_chars=self._config.description_max_chars,
        )

        out: CatalogRow = {
            "id": stock_num,
            "title": title,
            "description": description,
            "availability": FB_AVAILABILITY,
            "condition": FB_CONDITION,
            "price": format_price(retail, PRICE_CURRENCY),
            "link": f"{self._config.site_url}/vehicle/{stock_num}",
            "image_link": images[0],
            "brand": make,
            "google_product_category": FB_GOOGLE_PRODUCT_CATEGORY,
            "fb_product_category": FB_PRODUCT_CATEGORY,
            "quantity_to_sell_on_facebook": "",
            "sale_price": "",
            "sale_price_effective_date": "",
            "item_group_id": "",
            "gender": "",
            "color": ext_color,
            "size": "",
            "age_group": "",
            "material": "",
            "pattern": "",
            "shipping": "",
            "shipping_weight": "",
            "video[0].url": youtube_url,
            "video[0].tag[0]": FB_VIDEO_TAG if youtube_url else "",
            "gtin": "",
            "product_tags[0]": row.get(COL_TYPE, ""),
            "product_tags[1]": format_miles(mileage),
            "style[0]": "",
        }
        return out, ""

    def convert(self, text: str) -> ConversionResult:
        lines = split_csv_lines(text)
        if len(lines) < 2:
            raise EmptyInputError("CSV has no data rows.")

        col_idx = {h: i for i, h in enumerate(parse_csv_line(lines[0]))}
        result = ConversionResult()
        for line in lines[1:]:
            cols = parse_csv_line(line)
            row = {name: cols[i] if i < len(cols) else "" for name, i in col_idx.items()}
            out, reason = self.convert_row(row)
            if out is None:
                self._log(
                    f"Skip: {row.get(COL_YEAR, '')} {row.get(COL_MAKE, '')} {row.get(COL_MODEL, '')} "
                    f"(Stock #{row.get(COL_STOCK_NUMBER, '')}) - {reason}"
                )
                result.add_skip(reason)
                continue
            result.rows.append(out)
        return result

    def render(self, result: ConversionResult) -> str:
        return render_catalog_csv(self._headers, result.rows)  # type: ignore[arg-type]

    def run(self, input_path: str, output_path: str, copy_path: str | None = None) -> ConversionResult:
        if not os.path.exists(input_path):
            raise MissingInputError(input_path)
        result = self.convert(read_text(input_path))
        content = self.render(result)

        write_text(output_path, content)
        self._log(f"✅ Wrote {len(result.rows)} vehicles to: {output_path}")
        self._log(f"Skipped {result.skipped} rows (no price, no image, or invalid)")
        for reason, count in result.skip_reasons.items():
            self._log(f"  - {reason}: {count}")

        if copy_path and os.path.abspath(copy_path) != os.path.abspath(output_path):
            try:
                write_text(copy_path, content)
                self._log(f"✅ Copied to: {copy_path}")
            except OSError as e:
                self._log(f"⚠️ Could not copy to public: {e}")
        return result


def build_default_converter(*, logger: LogFunc) -> CatalogConverter:
    return CatalogConverter(config=CatalogConfig(), logger=logger)
