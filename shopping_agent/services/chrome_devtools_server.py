"""Chrome DevTools Server: launch descriptor for the chrome-devtools-mcp process.

Invariants:
    - Base args are always present, in order, and never change
    - Container args appended only when CHROME_PATH equals CONTAINER_CHROME_PATH exactly
    - Pure function of the given environment mapping

Design Decisions:
    - Container: explicit Chromium path, OS/setuid sandbox, /dev/shm and GPU disabled
    - Local: no executable override, chrome-devtools-mcp auto-detects installed Chrome
"""

from typing import Mapping

from shopping_agent.core.session_options import ToolServerDescriptor

CHROME_PATH_ENV = "CHROME_PATH"
CONTAINER_CHROME_PATH = "/usr/bin/chromium"

LAUNCH_COMMAND = "npx"

BASE_ARGS: tuple[str, ...] = (
    "-y",
    "chrome-devtools-mcp@latest",
    "--headless",
    "--isolated",
    "--no-category-emulation",
    "--no-category-performance",
    "--no-category-network",
)

CONTAINER_ARGS: tuple[str, ...] = (
    f"--executable-path={CONTAINER_CHROME_PATH}",
    "--chrome-arg=--no-sandbox",
    "--chrome-arg=--disable-setuid-sandbox",
    "--chrome-arg=--disable-dev-shm-usage",
    "--chrome-arg=--disable-gpu",
)


def is_container(env: Mapping[str, str]) -> bool:
    return env.get(CHROME_PATH_ENV) == CONTAINER_CHROME_PATH


def build_chrome_devtools_args(env: Mapping[str, str]) -> list[str]:
    """Command-line args for npx, with sandbox flags only in containers."""
    if is_container(env):
        return [*BASE_ARGS, *CONTAINER_ARGS]
    return list(BASE_ARGS)


def build_chrome_devtools_server(env: Mapping[str, str]) -> ToolServerDescriptor:
    return ToolServerDescriptor(
        command=LAUNCH_COMMAND,
        args=tuple(build_chrome_devtools_args(env)),
    )
