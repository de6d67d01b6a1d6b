"""Agent Options: builds the SessionOptions for one shopping agent session.

Invariants:
    - model, allowed tools, max turns and system prompt are fixed constants
    - env is a full copy of the given mapping (os.environ when omitted)
    - standalone=True attaches the chrome-devtools server; False leaves tool-server
      connectivity to the caller (e.g. a shared long-lived process)
    - Never raises
"""

import os
from typing import Mapping

from shopping_agent.core.session_options import SessionOptions
from shopping_agent.services.chrome_devtools_server import build_chrome_devtools_server
from shopping_agent.services.system_prompt import SYSTEM_PROMPT
from shopping_agent.services.tools_registry import ALLOWED_TOOLS, CHROME_DEVTOOLS_SERVER

AGENT_MODEL = "haiku"
MAX_TURNS = 50


def build_agent_options(
    standalone: bool = False, env: Mapping[str, str] | None = None,
) -> SessionOptions:
    """Fresh SessionOptions; reads nothing but the environment mapping."""
    env = dict(os.environ if env is None else env)
    mcp_servers = None
    if standalone:
        mcp_servers = {CHROME_DEVTOOLS_SERVER: build_chrome_devtools_server(env)}
    return SessionOptions(
        env=env,
        system_prompt=SYSTEM_PROMPT,
        model=AGENT_MODEL,
        allowed_tools=ALLOWED_TOOLS,
        max_turns=MAX_TURNS,
        mcp_servers=mcp_servers,
    )
