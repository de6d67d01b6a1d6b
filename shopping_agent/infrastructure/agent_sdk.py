"""Agent SDK Boundary: runs claude_agent_sdk.query() and maps its messages to raw events.

Invariants:
    - Every SDK message maps to exactly one RawAgentEvent variant
    - Absent content / usage / result fields become empty or None, never errors
    - SDK exceptions (ClaudeSDKError and subclasses) propagate unchanged
    - Closing the returned iterator closes the SDK stream (and its CLI + MCP processes)

Design Decisions:
    - isinstance dispatch on SDK message classes, getattr for optional fields:
      SDK minor versions add/remove fields (e.g. usage on AssistantMessage)
    - Usage accepted as dict or attribute object; read from AssistantMessage only,
      since ResultMessage.usage totals the per-turn counts already reported
"""

import logging
from collections.abc import AsyncIterator
from contextlib import aclosing
from typing import Any

import claude_agent_sdk as sdk

from shopping_agent.core.agent_events import (
    AssistantMessage, ResultMessage, OtherMessage,
    ContentBlock, TextContent, ToolInvocation, TokenUsage,
    RawAgentEvent,
)
from shopping_agent.core.session_options import SessionOptions

logger = logging.getLogger(__name__)


async def run_agent_query(
    prompt: str, options: SessionOptions,
) -> AsyncIterator[RawAgentEvent]:
    """Open one agent session and yield its messages as raw events."""
    messages = sdk.query(prompt=prompt, options=options.to_sdk_options())
    async with aclosing(messages) as stream:
        async for message in stream:
            yield to_raw_event(message)


def to_raw_event(message: Any) -> RawAgentEvent:
    if isinstance(message, sdk.AssistantMessage):
        return AssistantMessage(
            blocks=to_content_blocks(getattr(message, "content", None)),
            usage=to_token_usage(getattr(message, "usage", None)),
        )
    if isinstance(message, sdk.ResultMessage):
        return ResultMessage(result=getattr(message, "result", None))
    kind = getattr(message, "subtype", None) or type(message).__name__
    logger.debug("Skipping agent message: %s", kind)
    return OtherMessage(kind=kind)


def to_content_blocks(content: Any) -> tuple[ContentBlock, ...]:
    """Text and tool_use blocks in message order; other block kinds dropped."""
    if not content or isinstance(content, str):
        return ()
    blocks: list[ContentBlock] = []
    for block in content:
        if isinstance(block, sdk.TextBlock):
            blocks.append(TextContent(text=block.text))
        elif isinstance(block, sdk.ToolUseBlock):
            blocks.append(ToolInvocation(name=block.name))
    return tuple(blocks)


def to_token_usage(usage: Any) -> TokenUsage | None:
    if usage is None:
        return None
    if isinstance(usage, dict):
        return TokenUsage(
            input_tokens=usage.get("input_tokens"),
            output_tokens=usage.get("output_tokens"),
        )
    return TokenUsage(
        input_tokens=getattr(usage, "input_tokens", None),
        output_tokens=getattr(usage, "output_tokens", None),
    )
