"""Content Endpoints — descriptors binding prompt, schema and fallback per endpoint."""

from prenatal_api.core.fallback_data import (
    get_fallback_development,
    get_fallback_exercises,
)
from prenatal_api.core.prompts import build_development_prompt, build_exercise_prompt
from prenatal_api.schemas.content import DevelopmentResponse, ExerciseResponse
from prenatal_api.services.content_pipeline import ContentEndpoint

BABY_DEVELOPMENT = ContentEndpoint(
    name="baby-development",
    build_prompt=build_development_prompt,
    schema=DevelopmentResponse,
    fallback=get_fallback_development,
)

EXERCISE_RECOMMENDATIONS = ContentEndpoint(
    name="exercise-recommendations",
    build_prompt=build_exercise_prompt,
    schema=ExerciseResponse,
    fallback=get_fallback_exercises,
)
