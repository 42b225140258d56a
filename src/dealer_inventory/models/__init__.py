"""Typed row shapes shared by the pipelines."""

from .inventory import CatalogRow, InventoryRow, ValuationResult

__all__ = ["CatalogRow", "InventoryRow", "ValuationResult"]
