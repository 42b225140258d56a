from __future__ import annotations

import os
from typing import Iterable, Mapping, Sequence

from dealer_inventory.utils import csv_escape


def write_text(path: str, content: str) -> None:
    """Write the whole file at once, creating parent directories as needed."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    tmp_path = f"{path}.tmp"
    try:
        # newline="" keeps CRLF/LF exactly as rendered
        with open(tmp_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.replace(tmp_path, path)
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)


def read_text(path: str) -> str:
    # undecodable bytes (cp1252 exports) become U+FFFD instead of aborting the run
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
        return f.read()


def render_catalog_csv(headers: Sequence[str], rows: Iterable[Mapping[str, str]]) -> str:
    """RFC 4180 escaped, CRLF after every line including the last."""
    lines = [",".join(headers)]
    for row in rows:
        lines.append(",".join(csv_escape(row.get(h, "")) for h in headers))
    return "\r\n".join(lines) + "\r\n"


def render_valuation_csv(headers: Sequence[str], rows: Iterable[Mapping[str, str]]) -> str:
    # header as-is, every value wrapped in quotes, LF between rows
    lines = [",".join(headers)]
    for row in rows:
        lines.append(",".join(f'"{row.get(h) or ""}"' for h in headers))
    return "\n".join(lines)
