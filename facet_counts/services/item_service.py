# facet_counts/services/item_service.py
from datetime import datetime
from typing import List, Optional, Sequence, Union
from ..config import Config
from ..utils.formatters import to_id, to_number, utc_now

# Shared by every item read; $1 is the category id array, $2 the reference instant
ACTIVE_ITEM_CONDITION = """
    category_id = ANY($1)
    AND status = 'published'
    AND (expires_at IS NULL OR expires_at > $2)
"""


class ItemService:
    """Read access to active (published, not expired) items"""

    def __init__(self, db):
        self.db = db

    async def query_active_prices(self, category_ids: Sequence[str],
                                  now: Optional[datetime] = None) -> List[Optional[Union[int, float]]]:
        """Prices of the active items; null prices are passed through"""
        async with self.db.pool.acquire() as conn:
            rows = await conn.fetch(f"""
                SELECT price
                FROM {Config.ITEMS_TABLE}
                WHERE {ACTIVE_ITEM_CONDITION}
            """, list(category_ids), now or utc_now())
            return [to_number(r['price']) for r in rows]

    async def count_active(self, category_ids: Sequence[str], now: Optional[datetime] = None) -> int:
        """Number of active items"""
        async with self.db.pool.acquire() as conn:
            count = await conn.fetchval(f"""
                SELECT COUNT(*)
                FROM {Config.ITEMS_TABLE}
                WHERE {ACTIVE_ITEM_CONDITION}
            """, list(category_ids), now or utc_now())
            return count or 0

    async def query_active_category_ids(self, category_ids: Sequence[str],
                                        now: Optional[datetime] = None) -> List[Optional[str]]:
        """category_id of every active item, one entry per item"""
        async with self.db.pool.acquire() as conn:
            rows = await conn.fetch(f"""
                SELECT category_id
                FROM {Config.ITEMS_TABLE}
                WHERE {ACTIVE_ITEM_CONDITION}
            """, list(category_ids), now or utc_now())
            return [to_id(r['category_id']) for r in rows]
