"""Content Pipeline — call the model for one endpoint, degrade to fallback data on failure.

Invariants:
    - At most one model call per request, awaited before responding
    - request_content() never raises UpstreamError: every failure stage becomes
      UpstreamResult.failure (call, empty text, non-JSON, schema mismatch)
    - resolve_content() always returns a response dict; without a client it
      goes straight to the fallback provider
    - Model-derived and fallback bodies share one shape; no provenance field

Design Decisions:
    - ContentEndpoint descriptor: both endpoints differ only in prompt, schema
      and fallback table, so one pipeline serves both
    - Strict JSON parse of the concatenated text blocks: the prompt forbids
      markdown, so anything else is treated as a failed answer
"""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from prenatal_api.core.domain_types import GestationRequest
from prenatal_api.core.errors import ErrorContext, UpstreamError
from prenatal_api.core.upstream_result import UpstreamResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContentEndpoint:
    """Everything that differs between the two content endpoints."""
    name: str
    build_prompt: Callable[[Any, Any, Any], str]
    schema: type[BaseModel]
    fallback: Callable[[Any, Any, Any], dict]


def extract_text(content: Any) -> str:
    """Join text-typed content blocks in order, trimmed."""
    if not content:
        return ""
    parts = [
        b.text for b in content
        if getattr(b, "type", None) == "text" and getattr(b, "text", None)
    ]
    return "\n".join(parts).strip()


def parse_model_json(
    text: str, schema: type[BaseModel], context: ErrorContext | None = None,
) -> dict:
    """Parse model text as strict JSON and validate it against schema."""
    if not text:
        raise UpstreamError("Model returned no text", "empty_response", context=context)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise UpstreamError(f"Model text is not JSON: {e}", "invalid_json", context=context)
    try:
        return schema.model_validate(data).model_dump()
    except ValidationError as e:
        raise UpstreamError(
            f"Model JSON does not match {schema.__name__}: {e.error_count()} error(s)",
            "schema_mismatch", context=context,
        )


async def request_content(
    client, endpoint: ContentEndpoint, request: GestationRequest, max_tokens: int,
) -> UpstreamResult[dict]:
    """Ask the model for one endpoint's content."""
    context = ErrorContext(
        endpoint=endpoint.name, language=request.locale.value, weeks=request.weeks,
    )
    prompt = endpoint.build_prompt(request.weeks, request.days, request.language)
    try:
        response = await client.create_message(
            max_tokens=max_tokens,
            messages=[{"role": "user", "content": prompt}],
            context=context,
        )
        text = extract_text(getattr(response, "content", None))
        return UpstreamResult.success(parse_model_json(text, endpoint.schema, context))
    except UpstreamError as e:
        return UpstreamResult.failure(e)
    except Exception as e:
        logger.error(f"Unexpected error calling model: {e}", exc_info=True)
        return UpstreamResult.failure(UpstreamError(str(e), "unknown", context=context))


async def resolve_content(
    client, endpoint: ContentEndpoint, request: GestationRequest, max_tokens: int,
) -> dict:
    """Model content when available, otherwise the localized fallback."""
    def fallback(error: UpstreamError | None = None) -> dict:
        return endpoint.fallback(request.weeks, request.days, request.language)

    if client is None:
        return fallback()

    result = await request_content(client, endpoint, request, max_tokens)
    if not result.ok:
        logger.warning(
            f"Serving fallback content: {result.error.message}",
            extra={
                "endpoint": endpoint.name,
                "language": request.locale.value,
                "weeks": request.weeks,
                "upstream_error": result.error.kind,
                "status_code": result.error.status_code,
            },
        )
    return result.unwrap_or_else(fallback)
