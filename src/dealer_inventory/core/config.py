from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

try:
    from dotenv import load_dotenv
except Exception:  # pragma: no cover - optional dependency
    load_dotenv = None

from dealer_inventory.core.constants import DEFAULT_SENSITIVE_COLUMNS, REDACTION_TOKEN

REPO_ROOT = Path(__file__).resolve().parents[3]

if load_dotenv:
    load_dotenv(dotenv_path=REPO_ROOT / ".env")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _env_list(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    """Comma-separated env var as a tuple, falling back to the default when unset."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    return tuple(x.strip() for x in raw.split(",") if x.strip())


# ==========================================
# Gemini (valuation)
# ==========================================

GEMINI_API_BASE = os.getenv("GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
GEMINI_TIMEOUT_SEC = _env_int("GEMINI_TIMEOUT_SEC", 60)
GEMINI_MAX_OUTPUT_TOKENS = _env_int("GEMINI_MAX_OUTPUT_TOKENS", 300)


def get_gemini_api_key() -> str:
    return os.getenv("GEMINI_API_KEY", "").strip()


# ==========================================
# Default file locations
# ==========================================

PROJECT_ROOT = Path(os.getenv("INVENTORY_PROJECT_ROOT", str(REPO_ROOT))).resolve()

VALUATION_DEFAULT_INPUT = "inventorycsv.csv"
VALUATION_DEFAULT_OUTPUT = "inventoryeditedvalues.csv"

CATALOG_DEFAULT_INPUT = str(PROJECT_ROOT / "public" / "inventorycsv.csv")
CATALOG_DEFAULT_OUTPUT = str(PROJECT_ROOT.parent / "inventory" / "inventoryFB.csv")
CATALOG_PUBLIC_COPY = str(PROJECT_ROOT / "public" / "inventoryFB.csv")

DEFAULT_CONTACT_FOOTER = (
    "Contact us for details! High Life Auto - Fort Madison, IA. "
    "Call/Text Matt 309-337-1049 or Miriam 309-267-7200."
)


# ==========================================
# Per-pipeline settings
# ==========================================


@dataclass(frozen=True)
class ValuationConfig:
    state: str = os.getenv("VALUATION_STATE", "Iowa")
    delay_sec: float = _env_float("VALUATION_DELAY_SEC", 1.0)


@dataclass(frozen=True)
class SanitizerConfig:
    sensitive_columns: Tuple[str, ...] = _env_list("SANITIZE_SENSITIVE_COLUMNS", DEFAULT_SENSITIVE_COLUMNS)
    redaction_token: str = REDACTION_TOKEN


@dataclass(frozen=True)
class CatalogConfig:
    site_url: str = os.getenv("FB_SITE_URL", "https://highlifeauto.com").rstrip("/")
    contact_footer: str = os.getenv("FB_CONTACT_FOOTER", DEFAULT_CONTACT_FOOTER)
    description_max_chars: int = _env_int("FB_DESCRIPTION_MAX_CHARS", 5000)
