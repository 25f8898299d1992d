# facet_counts/services/facet_service.py
"""Facet aggregation for the marketplace filter sidebar.

Given a category (or none for the whole store) this expands the category to
its subtree, reads the pre-aggregated attribute counts and the active item
figures concurrently, and folds everything into one FacetResponse.
"""
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Union
from ..models.attribute_count import AttributeCount, FacetValue
from ..models.category import Category
from ..models.facet import FacetGroup, FacetResponse, FacetValueCount, PriceRange
from ..utils.formatters import utc_now
from ..utils.tasks import gather_or_cancel

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"


def build_children_index(categories: Iterable[Category]) -> Dict[str, List[str]]:
    """parent id -> child ids, in listing order"""
    children: Dict[str, List[str]] = {}
    for category in categories:
        if category.parent_id is not None:
            children.setdefault(category.parent_id, []).append(category.id)
    return children


def expand_category_ids(category_id: Optional[str], categories: Sequence[Category]) -> List[str]:
    """The requested category plus all of its descendants.

    Without a category every known id is returned. Traversal uses an
    explicit stack and a visited set, so a parent_id cycle in the data
    cannot make it loop.
    """
    if not category_id:
        return list(dict.fromkeys(c.id for c in categories))

    children = build_children_index(categories)
    expanded = [category_id]
    visited = {category_id}
    stack = [category_id]
    while stack:
        current = stack.pop()
        for child in children.get(current, ()):
            if child in visited:
                continue
            visited.add(child)
            expanded.append(child)
            stack.append(child)
    return expanded


def merge_filters(category_specific: Iterable[AttributeCount],
                  general: Iterable[AttributeCount]) -> Dict[str, FacetGroup]:
    """Group counts by attribute key and sum counts of repeated values.

    Category-specific counts are visited first, so their label/type win and
    their values come first among equal counts.
    """
    groups: Dict[str, FacetGroup] = {}
    tallies: Dict[str, Dict[FacetValue, int]] = {}

    for sources in (category_specific, general):
        for count in sources:
            key = count.attribute_key
            if key not in groups:
                groups[key] = FacetGroup(label=count.attribute_label, type=count.attribute_type)
                tallies[key] = {}
            values = tallies[key]
            values[count.value] = values.get(count.value, 0) + count.item_count

    for key, group in groups.items():
        ordered = sorted(tallies[key].items(), key=lambda pair: pair[1], reverse=True)
        group.values = [FacetValueCount(value=value, count=n) for value, n in ordered]
    return groups


def compute_price_range(prices: Iterable[Optional[Union[int, float]]]) -> Optional[PriceRange]:
    """Min/max over usable prices; None when there is none"""
    usable = [p for p in prices if p]
    if not usable:
        return None
    return PriceRange(min=min(usable), max=max(usable))


def count_subcategories(item_category_ids: Iterable[Optional[str]],
                        requested_id: Optional[str] = None) -> Dict[str, int]:
    """Active items per category, leaving out the requested category itself"""
    counts: Dict[str, int] = {}
    for category_id in item_category_ids:
        if not category_id or category_id == requested_id:
            continue
        counts[category_id] = counts.get(category_id, 0) + 1
    return counts


class FacetService:
    """Builds the filter counts for a category scope from the injected stores"""

    def __init__(self, category_service, attribute_count_service, item_service):
        self.category_service = category_service
        self.attribute_count_service = attribute_count_service
        self.item_service = item_service

    async def get_filter_counts(self, category_id: Optional[str] = None) -> FacetResponse:
        """Facet groups, total, price range and subcategory counts for one request"""
        category_id = category_id or None
        categories = await self.category_service.list_all()
        category_ids = expand_category_ids(category_id, categories)

        # one reference instant so all item reads apply the same expiry cut-off
        now = utc_now()
        category_specific, general, prices, total, item_category_ids = await gather_or_cancel(
            self.attribute_count_service.query_category_specific(category_ids),
            self.attribute_count_service.query_general(category_ids),
            self.item_service.query_active_prices(category_ids, now),
            self.item_service.count_active(category_ids, now),
            self.item_service.query_active_category_ids(category_ids, now),
        )

        response = FacetResponse(
            category_id=category_id or ALL_CATEGORIES,
            filters=merge_filters(category_specific, general),
            total_items=total or 0,
            price_range=compute_price_range(prices),
            subcategory_counts=count_subcategories(item_category_ids, category_id),
        )
        logger.debug(
            f"Filter counts for {response.category_id}: {len(category_ids)} categories, "
            f"{len(response.filters)} facets, {response.total_items} items"
        )
        return response
