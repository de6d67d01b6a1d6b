"""Services Layer: agent configuration and the streaming entry point.

Invariants:
    - Configuration builders are pure functions of their arguments
    - stream_agent is the only module that drives the agent runtime
"""
