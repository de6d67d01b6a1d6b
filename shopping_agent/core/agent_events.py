"""Agent Events: tagged variants for raw runtime messages and normalized stream events.

Invariants:
    - Raw variants model every optional runtime field as nullable (never probed ad hoc)
    - Normalized events serialize to {"type": ..., ...} dicts via to_dict()
    - All event values are frozen: the normalizer never mutates or retains them

Design Decisions:
    - Frozen dataclasses over Pydantic: events are internal values, validated at the
      SDK boundary (infrastructure/agent_sdk.py), not at the HTTP boundary
    - Raw variants are independent of claude_agent_sdk types so core/ stays IO-free
"""

from dataclasses import dataclass
from typing import Union


# ─── Raw Agent Events (read from the runtime) ────────────────────

@dataclass(frozen=True)
class TextContent:
    text: str | None = None


@dataclass(frozen=True)
class ToolInvocation:
    """A tool call; only the namespaced name reaches consumers."""
    name: str


ContentBlock = Union[TextContent, ToolInvocation]


@dataclass(frozen=True)
class TokenUsage:
    """Token counts as reported by the runtime; either may be missing."""
    input_tokens: int | None = None
    output_tokens: int | None = None


@dataclass(frozen=True)
class AssistantMessage:
    blocks: tuple[ContentBlock, ...] = ()
    usage: TokenUsage | None = None


@dataclass(frozen=True)
class ResultMessage:
    """Final answer. Its usage is the session total and is not re-reported."""
    result: str | None = None


@dataclass(frozen=True)
class OtherMessage:
    """System/init, tool results, permission requests, partial deltas."""
    kind: str = "unknown"


RawAgentEvent = Union[AssistantMessage, ResultMessage, OtherMessage]


# ─── Normalized Events (yielded to the caller) ───────────────────

@dataclass(frozen=True)
class TextEvent:
    text: str

    def to_dict(self) -> dict:
        return {"type": "text", "text": self.text}


@dataclass(frozen=True)
class ToolEvent:
    name: str

    def to_dict(self) -> dict:
        return {"type": "tool", "name": self.name}


@dataclass(frozen=True)
class UsageEvent:
    input: int
    output: int

    def to_dict(self) -> dict:
        return {"type": "usage", "input": self.input, "output": self.output}


@dataclass(frozen=True)
class ResultEvent:
    text: str

    def to_dict(self) -> dict:
        return {"type": "result", "text": self.text}


@dataclass(frozen=True)
class DoneEvent:
    def to_dict(self) -> dict:
        return {"type": "done"}


NormalizedEvent = Union[TextEvent, ToolEvent, UsageEvent, ResultEvent, DoneEvent]
