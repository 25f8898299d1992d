# facet_counts/models/facet.py
from typing import Dict, List, Optional, Union
from pydantic import BaseModel, Field


class FacetValueCount(BaseModel):
    value: Union[str, int, float]
    count: int


class FacetGroup(BaseModel):
    """One filterable attribute with its values, most frequent first"""
    label: str
    type: Optional[str] = None
    values: List[FacetValueCount] = Field(default_factory=list)


class PriceRange(BaseModel):
    min: Union[int, float]
    max: Union[int, float]


class FacetResponse(BaseModel):
    """Filter sidebar payload for one category scope"""
    category_id: str
    filters: Dict[str, FacetGroup] = Field(default_factory=dict)
    total_items: int = 0
    price_range: Optional[PriceRange] = None
    subcategory_counts: Dict[str, int] = Field(default_factory=dict)

    def to_payload(self) -> dict:
        """JSON-ready dict; unset optional fields are left out"""
        return self.model_dump(mode="json", exclude_none=True)
