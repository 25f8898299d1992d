# facet_counts/models/base.py
from pydantic import BaseModel, ConfigDict


class ReadModel(BaseModel):
    """Base model for rows read from the count sources"""

    model_config = ConfigDict(from_attributes=True, frozen=True)
