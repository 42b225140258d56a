from __future__ import annotations

import os
from typing import Sequence

from dealer_inventory.core.config import SanitizerConfig
from dealer_inventory.core.errors import EmptyInputError, MissingInputError, UsageError
from dealer_inventory.export.writers import read_text, write_text
from dealer_inventory.processing.types import LogFunc
from dealer_inventory.utils import parse_csv_line, split_lines_keep_blank


class CsvSanitizer:
    """Replaces cost columns with a redaction token and fans the result out to several files."""

    def __init__(self, *, config: SanitizerConfig, logger: LogFunc) -> None:
        self._config = config
        self._sensitive = {c.strip().lower() for c in config.sensitive_columns}
        self._log = logger

    def sensitive_indices(self, header_line: str) -> list[int]:
        indices: list[int] = []
        for idx, col in enumerate(parse_csv_line(header_line, keep_quotes=True)):
            name = col.replace('"', "").strip()
            if name.lower() in self._sensitive:
                indices.append(idx)
                self._log(f"Hiding column [{idx}]: \"{name}\"")
        return indices

    def sanitize_line(self, line: str, indices: Sequence[int]) -> str:
        cols = parse_csv_line(line, keep_quotes=True)
        for idx in indices:
            if idx < len(cols):
                cols[idx] = self._config.redaction_token
        return ",".join(cols)

    def sanitize_text(self, raw: str) -> str:
        """Redact every data line; header and blank lines pass through. Output uses CRLF."""
        lines = split_lines_keep_blank(raw)
        indices = self.sensitive_indices(lines[0])
        if not indices:
            self._log("No sensitive columns found, copying as-is.")
        out = [lines[0]]
        for line in lines[1:]:
            out.append(line if not line.strip() else self.sanitize_line(line, indices))
        return "\r\n".join(out)

    def run(self, source: str, destinations: Sequence[str]) -> str:
        if not destinations:
            raise UsageError("at least one destination is required")
        if not os.path.exists(source):
            raise MissingInputError(source)
        self._log(f"Reading: {source}")
        raw = read_text(source)
        if not raw:
            raise EmptyInputError("Source CSV is empty.")
        output = self.sanitize_text(raw)
        for dest in destinations:
            write_text(dest, output)
            self._log(f"Wrote: {dest}")
        self._log("✅ Sanitization complete.")
        return output


def build_default_sanitizer(*, logger: LogFunc) -> CsvSanitizer:
    return CsvSanitizer(config=SanitizerConfig(), logger=logger)
