"""Agent Schemas: Pydantic model for the streaming endpoint request.

Invariants:
    - prompt is stripped and non-empty
    - prompt max length is enforced by the route (Settings.max_prompt_chars)
"""

from pydantic import BaseModel, Field, field_validator


class StreamRequest(BaseModel):
    """Body of POST /api/v1/agent/stream."""
    prompt: str = Field(min_length=1)

    @field_validator("prompt")
    @classmethod
    def strip_prompt(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("prompt must not be blank")
        return v
