"""Serve the shopping agent API: `python -m shopping_agent` or `shopping-agent`."""

import uvicorn

from shopping_agent.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "shopping_agent.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
