"""Exercise Recommendations — safe prenatal exercises for a point in pregnancy.

Invariants:
    - POST only; OPTIONS answers 200 with an empty body; other methods get 405
    - weeks validated before any model call
    - Always 200 once validated: model failures are served as fallback content
"""

from fastapi import APIRouter, Depends, Request, Response, status

from prenatal_api.config import Settings, get_settings
from prenatal_api.core.validate_request import check_method, validate_content_request
from prenatal_api.infrastructure.anthropic_client import get_messages_client
from prenatal_api.api.routes.content_route_helpers import (
    DISALLOWED_METHODS,
    read_json_body,
)
from prenatal_api.services.content_endpoints import EXERCISE_RECOMMENDATIONS
from prenatal_api.services.content_pipeline import resolve_content

PATH = "/api/exercise-recommendations"
router = APIRouter(tags=["exercise-recommendations"])


@router.options(PATH)
async def exercise_recommendations_preflight():
    return Response(status_code=status.HTTP_200_OK)


@router.post(PATH)
async def exercise_recommendations(
    request: Request,
    client=Depends(get_messages_client),
    settings: Settings = Depends(get_settings),
):
    body = await read_json_body(request)
    gestation = validate_content_request(body)
    return await resolve_content(
        client, EXERCISE_RECOMMENDATIONS, gestation, settings.exercise_max_tokens,
    )


@router.api_route(PATH, methods=DISALLOWED_METHODS, include_in_schema=False)
async def exercise_recommendations_method_not_allowed(request: Request):
    check_method(request.method)
