# facet_counts/__init__.py
"""Faceted filter counts for the marketplace search sidebar."""

__version__ = "0.1.0"
