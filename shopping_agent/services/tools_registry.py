"""Tools Registry: closed allowlist of chrome-devtools browser tools.

Invariants:
    - ALLOWED_TOOLS holds exactly the 13 namespaced chrome-devtools primitives
    - Every name is mcp__<server>__<tool> with server == CHROME_DEVTOOLS_SERVER
    - The runtime rejects any tool call outside this tuple

Design Decisions:
    - Explicit tuple, no discovery from the MCP server's tool listing
    - Grouped by primitive: input, navigation/tabs, waiting, capture
"""

CHROME_DEVTOOLS_SERVER = "chrome-devtools"


def mcp_tool_name(tool: str, server: str = CHROME_DEVTOOLS_SERVER) -> str:
    """Namespaced tool identifier as the agent runtime exposes it."""
    return f"mcp__{server}__{tool}"


_BROWSER_TOOLS = (
    # Input
    "click",
    "fill",
    "fill_form",
    "hover",
    "press_key",
    # Navigation + tabs
    "navigate_page",
    "new_page",
    "list_pages",
    "select_page",
    "close_page",
    # Waiting
    "wait_for",
    # Capture
    "take_screenshot",
    "take_snapshot",
)

ALLOWED_TOOLS: tuple[str, ...] = tuple(mcp_tool_name(t) for t in _BROWSER_TOOLS)
