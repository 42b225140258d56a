"""The three inventory pipelines and the completion client they share."""

__all__ = [
    "catalog",
    "llm_client",
    "sanitizer",
    "types",
    "valuation",
]
