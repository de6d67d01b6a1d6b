"""Normalize Events: pure mapping from one raw agent event to normalized events.

Invariants:
    - Output order per event: text blocks, tool blocks, usage, result
    - Usage comes from assistant messages only; the final result never repeats it
    - Empty text and empty result produce nothing
    - Missing token counts default to 0; other values pass through unchanged
    - Stateless: the output depends on the given event only

Design Decisions:
    - Returns a list per raw event; the async shell yields each item immediately,
      so no event is held back waiting for a later raw event
    - match-case on the tagged variants instead of attribute probing
"""

from shopping_agent.core.agent_events import (
    AssistantMessage, ResultMessage, OtherMessage,
    TextContent, ToolInvocation, TokenUsage,
    NormalizedEvent, RawAgentEvent,
    TextEvent, ToolEvent, UsageEvent, ResultEvent,
)


def normalize_event(event: RawAgentEvent) -> list[NormalizedEvent]:
    """Translate one raw agent event into zero or more normalized events."""
    match event:
        case AssistantMessage(blocks=blocks, usage=usage):
            out: list[NormalizedEvent] = [
                *_text_events(blocks), *_tool_events(blocks),
            ]
            out.extend(_usage_events(usage))
            return out
        case ResultMessage(result=result):
            return [ResultEvent(text=result)] if result else []
        case OtherMessage():
            return []
    return []


def _text_events(blocks) -> list[TextEvent]:
    return [
        TextEvent(text=b.text) for b in blocks
        if isinstance(b, TextContent) and b.text
    ]


def _tool_events(blocks) -> list[ToolEvent]:
    return [ToolEvent(name=b.name) for b in blocks if isinstance(b, ToolInvocation)]


def _usage_events(usage: TokenUsage | None) -> list[UsageEvent]:
    if usage is None:
        return []
    return [UsageEvent(
        input=usage.input_tokens or 0,
        output=usage.output_tokens or 0,
    )]
