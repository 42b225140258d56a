from __future__ import annotations

import os
import time
from typing import Sequence

from dealer_inventory.core.config import ValuationConfig, get_gemini_api_key
from dealer_inventory.core.constants import (
    COL_MAKE,
    COL_MILEAGE,
    COL_MILES,
    COL_MODEL,
    COL_TRIM,
    COL_YEAR,
    VALUATION_COLUMNS,
    VALUATION_FIELD_MAP,
)
from dealer_inventory.core.errors import MissingCredentialError, MissingInputError
from dealer_inventory.export.writers import read_text, render_valuation_csv, write_text
from dealer_inventory.models import InventoryRow, ValuationResult
from dealer_inventory.processing.llm_client import GeminiCompletionClient, parse_valuation_json
from dealer_inventory.processing.types import CompleteFunc, LogFunc, SleepFunc
from dealer_inventory.utils import parse_csv_line, split_csv_lines

VALUATION_PROMPT = """Valuate this car: {car_desc}.
Rules:
1. "Wholesale" value = Trade-in value.
2. "Market" value = Private Party or Dealer Retail value.
3. Return ONLY a JSON object with this format:
{{
  "wholesale_low": "12345",
  "wholesale_high": "14567",
  "market_low": "16000",
  "market_high": "18000"
}}
If uncertain, estimate. No markdown."""


def read_inventory_csv(text: str) -> tuple[list[str], list[InventoryRow]]:
    """Header names plus one dict per data row; short rows pad with ''."""
    lines = split_csv_lines(text)
    if not lines:
        return [], []
    headers = parse_csv_line(lines[0])
    rows: list[InventoryRow] = []
    for line in lines[1:]:
        values = parse_csv_line(line)
        rows.append({h: (values[i] if i < len(values) else "") for i, h in enumerate(headers)})
    return headers, rows


def describe_car(row: InventoryRow, state: str) -> str:
    year = row.get(COL_YEAR, "")
    make = row.get(COL_MAKE, "")
    model = row.get(COL_MODEL, "")
    trim = row.get(COL_TRIM, "")
    miles = row.get(COL_MILEAGE) or row.get(COL_MILES) or "0"
    return f"{year} {make} {model} {trim} with {miles} miles in {state}"


class ValuationEnricher:
    def __init__(
        self,
        *,
        complete: CompleteFunc,
        config: ValuationConfig,
        logger: LogFunc,
        sleep: SleepFunc = time.sleep,
    ) -> None:
        self._complete = complete
        self._config = config
        self._log = logger
        self._sleep = sleep

    def build_prompt(self, row: InventoryRow) -> str:
        return VALUATION_PROMPT.format(car_desc=describe_car(row, self._config.state))

    def valuate_row(self, row: InventoryRow) -> ValuationResult | None:
        # None when the row has no make/model or the call/parse failed
        make = row.get(COL_MAKE, "")
        model = row.get(COL_MODEL, "")
        if not make or not model:
            return None
        try:
            text = self._complete(self.build_prompt(row))
            return parse_valuation_json(text)
        except Exception as e:
            self._log(f"❌ Error valuating {make} {model}: {e}")
            return None

    def enrich(self, rows: Sequence[InventoryRow]) -> list[InventoryRow]:
        results: list[InventoryRow] = []
        total = len(rows)
        for i, row in enumerate(rows, start=1):
            self._log(f"[{i}/{total}] Processing {row.get(COL_MAKE, '')} {row.get(COL_MODEL, '')}...")
            values = self.valuate_row(row)
            if values:
                for key, column in VALUATION_FIELD_MAP.items():
                    row[column] = values[key]  # type: ignore[literal-required]
            results.append(row)
            # fixed pause between rows to stay under the model's rate limit
            if self._config.delay_sec > 0:
                self._sleep(self._config.delay_sec)
        return results

    @staticmethod
    def output_headers(headers: Sequence[str]) -> list[str]:
        out = list(headers)
        for column in VALUATION_COLUMNS:
            if column not in out:
                out.append(column)
        return out

    def run(self, input_path: str, output_path: str) -> list[InventoryRow]:
        if not os.path.exists(input_path):
            raise MissingInputError(input_path)
        headers, rows = read_inventory_csv(read_text(input_path))
        self._log(f"Loaded {len(rows)} vehicles.")
        all_headers = self.output_headers(headers)
        results = self.enrich(rows)
        write_text(output_path, render_valuation_csv(all_headers, results))
        self._log(f"✅ Saved to {output_path}")
        return results


def build_default_enricher(*, logger: LogFunc, api_key: str | None = None) -> ValuationEnricher:
    key = api_key if api_key is not None else get_gemini_api_key()
    if not key:
        raise MissingCredentialError("GEMINI_API_KEY not found in environment.")
    client = GeminiCompletionClient(api_key=key)
    return ValuationEnricher(complete=client.complete, config=ValuationConfig(), logger=logger)
