# facet_counts/handlers/__init__.py
"""HTTP handlers"""
from .filter_counts_handler import CORS_HEADERS, get_facet_service, router as filter_counts_router

__all__ = [
    'CORS_HEADERS',
    'get_facet_service',
    'filter_counts_router',
]
