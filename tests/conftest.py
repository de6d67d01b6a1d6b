"""Root conftest: shared test configuration."""

import os

# Tests never reach a real container Chromium or the Claude CLI
os.environ.pop("CHROME_PATH", None)
os.environ.setdefault("ANTHROPIC_API_KEY", "sk-ant-test-fake-key")
os.environ.setdefault("LOG_FORMAT", "text")
