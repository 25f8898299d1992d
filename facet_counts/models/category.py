# facet_counts/models/category.py
from typing import Optional
from .base import ReadModel


class Category(ReadModel):
    """Category node; parent_id is None for roots"""
    id: str
    parent_id: Optional[str] = None
