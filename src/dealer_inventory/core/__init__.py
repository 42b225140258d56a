"""Core configuration and constants.

Import what you need from `dealer_inventory.core.config` and
`dealer_inventory.core.constants` to avoid reading the environment at import time
of unrelated modules.
"""

__all__ = ["config", "constants", "errors"]
