"""Command line entry points, one per pipeline."""

__all__ = ["fb_catalog", "sanitize", "valuation"]
