# facet_counts/services/__init__.py
from .category_service import CategoryService
from .attribute_count_service import AttributeCountService
from .item_service import ItemService
from .facet_service import FacetService

__all__ = [
    'CategoryService',
    'AttributeCountService',
    'ItemService',
    'FacetService',
]
