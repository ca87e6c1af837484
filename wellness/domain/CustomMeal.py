"""Custom meal entity: ingredient list and nutrition for the requested portions."""
from typing import List

from pydantic import Field, field_validator

from wellness.domain.ResponseModel import Scalar, ResponseModel, none_as_empty_dict, none_as_empty_list


class Nutrition(ResponseModel):
    calories: Scalar = None
    protein_g: Scalar = None
    carbs_g: Scalar = None
    fats_g: Scalar = None


class CustomMeal(ResponseModel):
    ingredients: List[str] = Field(default_factory=list)
    nutrition: Nutrition = Field(default_factory=Nutrition)

    @field_validator('ingredients', mode='before')
    @classmethod
    def validate_ingredients(cls, v):
        return none_as_empty_list(v)

    @field_validator('nutrition', mode='before')
    @classmethod
    def validate_nutrition(cls, v):
        return none_as_empty_dict(v)
