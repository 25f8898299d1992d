# facet_counts/services/category_service.py
from typing import List
from ..config import Config
from ..models.category import Category
from ..utils.formatters import to_id


class CategoryService:
    """Read access to the category table"""

    def __init__(self, db):
        self.db = db

    async def list_all(self) -> List[Category]:
        """Every category as an (id, parent_id) pair"""
        async with self.db.pool.acquire() as conn:
            categories = await conn.fetch(f"""
                SELECT id, parent_id
                FROM {Config.CATEGORIES_TABLE}
            """)
            return [
                Category(id=to_id(c['id']), parent_id=to_id(c['parent_id']))
                for c in categories
            ]
