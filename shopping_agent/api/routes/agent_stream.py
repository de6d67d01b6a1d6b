"""Agent Stream Route: SSE delivery of normalized shopping agent events.

Invariants:
    - One POST opens one standalone agent session via services.agent_stream.stream_agent
    - Each normalized event becomes one SSE data frame, in arrival order
    - Normal completion ends with the done frame; a runtime failure ends with a
      single error frame and no done frame
    - Client disconnect (CancelledError) is logged and re-raised

Design Decisions:
    - Runtime boundary supplied through the get_run_query dependency (tests override it)
    - Prompt length limit checked here against Settings, before any session starts
"""

import asyncio
import logging
import uuid

from claude_agent_sdk import ClaudeSDKError
from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from shopping_agent.config import get_settings
from shopping_agent.core.errors import PromptValidationError
from shopping_agent.infrastructure.agent_sdk import run_agent_query
from shopping_agent.schemas.agent import StreamRequest
from shopping_agent.services.agent_stream import RunQuery, stream_agent
from shopping_agent.api.routes.stream_helpers import (
    SSE_HEADERS, sse_line, runtime_error, unexpected_error_event,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/agent", tags=["agent"])


def get_run_query() -> RunQuery:
    return run_agent_query


@router.post("/stream")
async def stream_shopping_agent(
    body: StreamRequest, run_query: RunQuery = Depends(get_run_query),
):
    """SSE stream of text/tool/usage/result events, then done."""
    limit = get_settings().max_prompt_chars
    if len(body.prompt) > limit:
        raise PromptValidationError(
            f"Prompt exceeds {limit} characters ({len(body.prompt)})",
        )
    session_id = uuid.uuid4().hex

    async def event_generator():
        try:
            async for event in stream_agent(
                body.prompt, run_query=run_query, session_id=session_id,
            ):
                yield sse_line(event.to_dict())
        except asyncio.CancelledError:
            logger.info("Client disconnected from agent stream",
                extra={"session_id": session_id})
            raise
        except ClaudeSDKError as e:
            error = runtime_error(e, session_id)
            logger.warning("Agent stream ended with runtime error: %s", error.message,
                extra=error.log_fields())
            yield sse_line(error.to_sse_event())
        except Exception:
            yield sse_line(unexpected_error_event())

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )
