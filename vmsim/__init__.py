"""Hierarchical page-table virtual memory simulator with swapping."""

__version__ = "0.1.0"
__all__ = ["config", "physical", "virtual", "cli"]