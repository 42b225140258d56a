from __future__ import annotations


class InventoryToolError(Exception):
    """Base class for fatal setup errors raised before any row is processed."""


class UsageError(InventoryToolError):
    pass


class MissingInputError(InventoryToolError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Input file not found: {path}")
        self.path = path


class EmptyInputError(InventoryToolError):
    pass


class MissingCredentialError(InventoryToolError):
    pass


class CompletionError(Exception):
    """The completion service failed for one prompt; callers treat it per row."""
