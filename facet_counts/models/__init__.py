# facet_counts/models/__init__.py
from .category import Category
from .attribute_count import AttributeCount, FacetValue
from .facet import FacetGroup, FacetResponse, FacetValueCount, PriceRange

__all__ = [
    'Category',
    'AttributeCount',
    'FacetValue',
    'FacetGroup',
    'FacetResponse',
    'FacetValueCount',
    'PriceRange',
]
