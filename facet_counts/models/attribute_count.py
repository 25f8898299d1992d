# facet_counts/models/attribute_count.py
from typing import Optional, Union
from pydantic import model_validator
from .base import ReadModel

FacetValue = Union[str, int, float]


class AttributeCount(ReadModel):
    """Pre-aggregated item count for one attribute value in one category"""
    category_id: Optional[str] = None
    attribute_key: str
    attribute_label: str
    attribute_type: Optional[str] = None
    value_text: Optional[str] = None
    value_number: Optional[Union[int, float]] = None
    item_count: int = 0

    @model_validator(mode="after")
    def _exactly_one_value(self) -> "AttributeCount":
        if (self.value_text is None) == (self.value_number is None):
            raise ValueError(
                f"attribute {self.attribute_key!r} must carry exactly one of "
                "value_text / value_number"
            )
        return self

    @property
    def value(self) -> FacetValue:
        if self.value_text is not None:
            return self.value_text
        return self.value_number
