# facet_counts/services/attribute_count_service.py
import logging
from typing import Any, Iterable, List, Mapping, Sequence
from pydantic import ValidationError
from ..config import Config
from ..models.attribute_count import AttributeCount
from ..utils.formatters import to_id, to_number

logger = logging.getLogger(__name__)

CATEGORY_SPECIFIC = "category_specific"
GENERAL = "general"


def parse_attribute_counts(records: Iterable[Mapping[str, Any]], source: str) -> List[AttributeCount]:
    """Turn raw count rows into AttributeCount objects.

    Rows carrying both or neither of value_text/value_number are logged and
    skipped so one bad value does not blank the whole filter panel.
    """
    counts = []
    for record in records:
        row = dict(record)
        try:
            counts.append(AttributeCount(
                category_id=to_id(row.get('category_id')),
                attribute_key=row['attribute_key'],
                # unlabelled attributes fall back to their key
                attribute_label=(
                    row['attribute_key'] if row.get('attribute_label') is None
                    else row['attribute_label']
                ),
                attribute_type=row.get('attribute_type'),
                value_text=row.get('value_text'),
                value_number=to_number(row.get('value_number')),
                item_count=to_number(row.get('item_count')) or 0,
            ))
        except (ValidationError, KeyError) as e:
            logger.warning(
                f"Skipping malformed {source} count for attribute "
                f"{row.get('attribute_key')!r}: {e}"
            )
    return counts


class AttributeCountService:
    """Read access to the pre-aggregated attribute count views"""

    def __init__(self, db):
        self.db = db

    async def query_category_specific(self, category_ids: Sequence[str]) -> List[AttributeCount]:
        """Counts of attributes that only exist inside a category subtree"""
        return await self._query(Config.FILTER_COUNTS_VIEW, category_ids, CATEGORY_SPECIFIC)

    async def query_general(self, category_ids: Sequence[str]) -> List[AttributeCount]:
        """Counts of attributes shared by all categories (condition, ...)"""
        return await self._query(Config.GENERAL_FILTER_COUNTS_VIEW, category_ids, GENERAL)

    async def _query(self, view: str, category_ids: Sequence[str], source: str) -> List[AttributeCount]:
        async with self.db.pool.acquire() as conn:
            records = await conn.fetch(f"""
                SELECT category_id, attribute_key, attribute_label, attribute_type,
                       value_text, value_number, item_count
                FROM {view}
                WHERE category_id = ANY($1)
            """, list(category_ids))
            return parse_attribute_counts(records, source)
