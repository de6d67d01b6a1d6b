"""Session Options tests: immutability and conversion to ClaudeAgentOptions.

Invariants:
    - Fields cannot be reassigned; env / mcp_servers cannot be mutated in place
    - to_sdk_options() carries every field and the stdio server config
"""

import dataclasses

import pytest
from claude_agent_sdk import ClaudeAgentOptions

from shopping_agent.core.session_options import SessionOptions, ToolServerDescriptor


def _options(**overrides):
    fields = dict(
        env={"HOME": "/home/dev"},
        system_prompt="prompt",
        model="haiku",
        allowed_tools=["mcp__chrome-devtools__click"],
        max_turns=50,
    )
    fields.update(overrides)
    return SessionOptions(**fields)


def test_fields_are_frozen():
    options = _options()
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.model = "opus"


def test_env_is_read_only_copy():
    env = {"HOME": "/home/dev"}
    options = _options(env=env)
    env["HOME"] = "/tmp"
    assert options.env["HOME"] == "/home/dev"
    with pytest.raises(TypeError):
        options.env["HOME"] = "/root"


def test_allowed_tools_coerced_to_tuple():
    assert _options().allowed_tools == ("mcp__chrome-devtools__click",)


def test_mcp_servers_read_only():
    server = ToolServerDescriptor(command="npx", args=("-y",))
    options = _options(mcp_servers={"chrome-devtools": server})
    assert options.standalone is True
    with pytest.raises(TypeError):
        options.mcp_servers["other"] = server


def test_to_sdk_options_without_server():
    sdk_options = _options().to_sdk_options()
    assert isinstance(sdk_options, ClaudeAgentOptions)
    assert sdk_options.model == "haiku"
    assert sdk_options.max_turns == 50
    assert sdk_options.system_prompt == "prompt"
    assert sdk_options.allowed_tools == ["mcp__chrome-devtools__click"]
    assert sdk_options.env == {"HOME": "/home/dev"}
    assert not sdk_options.mcp_servers


def test_to_sdk_options_with_server():
    server = ToolServerDescriptor(command="npx", args=("-y", "chrome-devtools-mcp@latest"))
    sdk_options = _options(mcp_servers={"chrome-devtools": server}).to_sdk_options()
    assert sdk_options.mcp_servers == {
        "chrome-devtools": {
            "type": "stdio",
            "command": "npx",
            "args": ["-y", "chrome-devtools-mcp@latest"],
        },
    }
