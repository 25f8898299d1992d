# facet_counts/database/__init__.py
from .database import Database

__all__ = ['Database']
