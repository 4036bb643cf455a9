"""Content Schemas — Pydantic models for the two response entities.

Invariants:
    - DevelopmentResponse.developments has exactly 4 entries
    - ExerciseResponse.exercises is non-empty
    - Extra keys from the model are dropped; field order is the wire order

Design Decisions:
    - Model output is validated against these before it reaches a client, so a
      half-formed answer degrades to fallback data instead of breaking the UI
"""

from pydantic import BaseModel, ConfigDict, Field


class DevelopmentResponse(BaseModel):
    """Fetal development facts for one point in pregnancy."""
    model_config = ConfigDict(extra="ignore")

    icon: str
    length: str
    weight: str
    comparison: str
    title: str
    description: str
    developments: list[str] = Field(min_length=4, max_length=4)


class Exercise(BaseModel):
    """One recommended exercise."""
    model_config = ConfigDict(extra="ignore")

    name: str
    emoji: str
    description: str
    benefits: str


class ExerciseResponse(BaseModel):
    """Exercise recommendations for one point in pregnancy."""
    model_config = ConfigDict(extra="ignore")

    intro: str
    exercises: list[Exercise] = Field(min_length=1)
