"""Anthropic Client — wraps AsyncAnthropic with a single-attempt call and error mapping.

Invariants:
    - Exactly one attempt per call: SDK retries disabled (max_retries=0)
    - Every SDK failure mapped to UpstreamError (core/errors.py) with a kind
    - Provider error envelopes ({"error": {"message": ...}}) surface their message

Design Decisions:
    - Wrapper over raw client: isolates SDK exception types from the services layer
    - No backoff loop: a failed call degrades to fallback content, which is
      cheaper for the caller than waiting on retries
"""

import logging

import anthropic
from anthropic import (
    APIConnectionError,
    APIError,
    APIStatusError,
    APITimeoutError,
)

from prenatal_api.config import Settings
from prenatal_api.core.errors import ErrorContext, UpstreamError

logger = logging.getLogger(__name__)


def _envelope_message(e: APIStatusError) -> str:
    """Pull error.message out of the provider's error body when there is one."""
    body = getattr(e, "body", None)
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return str(e) or "API request failed"


class AnthropicMessagesClient:
    """Single-shot Messages API client bound to one model."""

    def __init__(
        self,
        api_key: str,
        model: str,
        timeout_seconds: float = 600.0,
    ):
        self.client = anthropic.AsyncAnthropic(
            api_key=api_key,
            timeout=timeout_seconds,
            max_retries=0,
        )
        self.model = model

    async def create_message(
        self,
        *,
        max_tokens: int,
        messages: list,
        context: ErrorContext | None = None,
    ):
        """Send one Messages API request; raise UpstreamError on any failure."""
        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=max_tokens,
                messages=messages,
            )
        except APITimeoutError:
            raise UpstreamError("API timeout", "timeout", context=context)
        except APIConnectionError as e:
            raise UpstreamError(str(e), "connection_error", context=context)
        except APIStatusError as e:
            raise UpstreamError(
                _envelope_message(e), "status_error",
                status_code=e.status_code, context=context,
            )
        except APIError as e:
            raise UpstreamError(str(e), "unknown", context=context)

        self._log_success(response)
        return response

    async def close(self) -> None:
        await self.client.close()

    def _log_success(self, response) -> None:
        usage = getattr(response, "usage", None)
        logger.info(
            "Anthropic API success",
            extra={
                "input_tokens": getattr(usage, "input_tokens", None),
                "output_tokens": getattr(usage, "output_tokens", None),
            },
        )


# Initialized on startup by the lifespan; stays None when no API key is configured
messages_client: AnthropicMessagesClient | None = None


def init_messages_client(settings: Settings) -> AnthropicMessagesClient | None:
    global messages_client
    if not settings.llm_configured:
        logger.info("ANTHROPIC_API_KEY not set, serving fallback content only")
        messages_client = None
    else:
        messages_client = AnthropicMessagesClient(
            settings.anthropic_api_key,
            settings.anthropic_model,
            settings.anthropic_timeout_seconds,
        )
    return messages_client


async def close_messages_client() -> None:
    global messages_client
    if messages_client is not None:
        await messages_client.close()
        messages_client = None


def get_messages_client() -> AnthropicMessagesClient | None:
    """FastAPI dependency — None means fallback mode."""
    return messages_client
