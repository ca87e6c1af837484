"""Plan entity: daily calorie target, meal plan and weekly fitness program."""
from typing import List, Optional

from pydantic import Field, field_validator

from wellness.domain.ResponseModel import Scalar, ResponseModel, none_as_empty_dict, none_as_empty_list


class Meal(ResponseModel):
    title: Optional[str] = None
    calories: Scalar = None
    protein_g: Scalar = None
    carbs_g: Scalar = None
    fats_g: Scalar = None


class MealPlan(ResponseModel):
    meals: List[Meal] = Field(default_factory=list)

    @field_validator('meals', mode='before')
    @classmethod
    def validate_meals(cls, v):
        return none_as_empty_list(v)


class WorkoutDay(ResponseModel):
    day: Optional[str] = None
    workout: List[str] = Field(default_factory=list)

    @field_validator('workout', mode='before')
    @classmethod
    def validate_workout(cls, v):
        return none_as_empty_list(v)


class FitnessProgram(ResponseModel):
    setting: Optional[str] = None
    days: List[WorkoutDay] = Field(default_factory=list)

    @field_validator('days', mode='before')
    @classmethod
    def validate_days(cls, v):
        return none_as_empty_list(v)


class Plan(ResponseModel):
    daily_calorie_target: Scalar = None
    meal_plan: MealPlan = Field(default_factory=MealPlan)
    fitness_program: FitnessProgram = Field(default_factory=FitnessProgram)

    @field_validator('meal_plan', 'fitness_program', mode='before')
    @classmethod
    def validate_sections(cls, v):
        """A missing section decodes as an empty one."""
        return none_as_empty_dict(v)


__all__ = ["Meal", "MealPlan", "WorkoutDay", "FitnessProgram", "Plan"]
