"""Infrastructure Layer: agent runtime boundary and cross-cutting concerns.

Invariants:
    - Only this layer imports claude_agent_sdk message/block types
    - Runtime failures are surfaced, never retried here
"""
