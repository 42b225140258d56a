"""Output rendering and file writes."""

__all__ = ["writers"]
