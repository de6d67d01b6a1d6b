"""Session Options: immutable per-session agent configuration values.

Invariants:
    - SessionOptions and ToolServerDescriptor are frozen; env and mcp_servers are
      read-only mappings, allowed_tools and args are tuples
    - mcp_servers is None when the tool server is supplied externally
    - to_sdk_options() is the only place claude_agent_sdk types are produced

Design Decisions:
    - Own value types instead of mutating ClaudeAgentOptions: built fresh per
      session, owned by the caller, converted at the runtime boundary
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from claude_agent_sdk import ClaudeAgentOptions


@dataclass(frozen=True)
class ToolServerDescriptor:
    """How the agent runtime spawns the browser-automation tool server."""
    command: str
    args: tuple[str, ...]
    transport: str = "stdio"

    def to_config(self) -> dict:
        """SDK stdio server config dict."""
        return {
            "type": self.transport,
            "command": self.command,
            "args": list(self.args),
        }


@dataclass(frozen=True)
class SessionOptions:
    env: Mapping[str, str]
    system_prompt: str
    model: str
    allowed_tools: tuple[str, ...]
    max_turns: int
    mcp_servers: Mapping[str, ToolServerDescriptor] | None = None

    def __post_init__(self):
        object.__setattr__(self, "env", MappingProxyType(dict(self.env)))
        object.__setattr__(self, "allowed_tools", tuple(self.allowed_tools))
        if self.mcp_servers is not None:
            object.__setattr__(
                self, "mcp_servers", MappingProxyType(dict(self.mcp_servers)),
            )

    @property
    def standalone(self) -> bool:
        return self.mcp_servers is not None

    def to_sdk_options(self) -> ClaudeAgentOptions:
        """Build the ClaudeAgentOptions handed to claude_agent_sdk.query()."""
        kwargs = dict(
            env=dict(self.env),
            system_prompt=self.system_prompt,
            model=self.model,
            allowed_tools=list(self.allowed_tools),
            max_turns=self.max_turns,
        )
        if self.mcp_servers is not None:
            kwargs["mcp_servers"] = {
                name: server.to_config()
                for name, server in self.mcp_servers.items()
            }
        return ClaudeAgentOptions(**kwargs)
