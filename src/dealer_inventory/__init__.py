"""Batch CSV tools for the dealership inventory publishing workflow."""

__version__ = "0.1.0"
