"""Restaurant search result."""
from typing import List, Optional

from pydantic import Field, field_validator

from wellness.domain.ResponseModel import Scalar, ResponseModel, none_as_empty_list


class Restaurant(ResponseModel):
    name: Optional[str] = None
    cuisine: Optional[str] = None
    address: Optional[str] = None
    distance_km: Scalar = None
    price_range: Optional[str] = None
    dietary_tags: List[str] = Field(default_factory=list)
    rating: Scalar = None

    @field_validator('dietary_tags', mode='before')
    @classmethod
    def validate_tags(cls, v):
        return none_as_empty_list(v)
