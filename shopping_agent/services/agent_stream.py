"""Agent Stream: public streaming entry point for the shopping agent.

Invariants:
    - Each call opens one standalone agent session (own chrome-devtools process)
    - Normalized events are yielded as soon as their raw event arrives
    - Exactly one DoneEvent, last, and only after the runtime stream is exhausted
    - Runtime errors propagate unchanged and no DoneEvent follows them
    - Early close / cancellation closes the runtime stream and is re-raised

Design Decisions:
    - run_query injectable: default is the claude_agent_sdk boundary, tests pass fakes
    - Normalization rules live in core/normalize_events.py (pure); this module is
      the async shell around them
"""

import asyncio
import logging
import uuid
from collections.abc import AsyncIterator, Callable
from contextlib import aclosing
from typing import Mapping

from shopping_agent.core.agent_events import (
    DoneEvent, NormalizedEvent, RawAgentEvent, ToolEvent, UsageEvent,
)
from shopping_agent.core.normalize_events import normalize_event
from shopping_agent.core.session_options import SessionOptions
from shopping_agent.infrastructure.agent_sdk import run_agent_query
from shopping_agent.services.agent_options import build_agent_options

logger = logging.getLogger(__name__)

RunQuery = Callable[[str, SessionOptions], AsyncIterator[RawAgentEvent]]


async def stream_agent(
    prompt: str,
    *,
    env: Mapping[str, str] | None = None,
    run_query: RunQuery = run_agent_query,
    session_id: str | None = None,
) -> AsyncIterator[NormalizedEvent]:
    """Async generator of normalized events for one agent session."""
    options = build_agent_options(standalone=True, env=env)
    session_id = session_id or uuid.uuid4().hex
    log_extra = {"session_id": session_id}
    logger.info("Agent session started", extra={**log_extra, "standalone": True})

    count = 0
    try:
        async with aclosing(run_query(prompt, options)) as raw_events:
            async for raw in raw_events:
                for event in normalize_event(raw):
                    _log_event(event, log_extra)
                    count += 1
                    yield event
    except (asyncio.CancelledError, GeneratorExit):
        logger.info("Agent session closed early",
            extra={**log_extra, "event_count": count})
        raise
    except Exception as e:
        logger.error("Agent session failed: %s", e,
            extra={**log_extra, "event_count": count}, exc_info=True)
        raise

    logger.info("Agent session complete",
        extra={**log_extra, "event_count": count})
    yield DoneEvent()


def _log_event(event: NormalizedEvent, log_extra: dict) -> None:
    match event:
        case ToolEvent(name=name):
            logger.debug("Tool invoked", extra={**log_extra, "tool_name": name})
        case UsageEvent(input=inp, output=out):
            logger.debug("Token usage", extra={
                **log_extra, "input_tokens": inp, "output_tokens": out,
            })
