"""Route Tests: POST /api/v1/agent/stream SSE delivery and error mapping.

Invariants:
    - Normal completion: one data frame per normalized event, done last
    - SDK failure mid-stream: frames so far, one AGENT_RUNTIME_ERROR frame, no done
    - Unexpected failure: INTERNAL_ERROR frame, no internals leaked, no done
    - Invalid or oversized prompts rejected with 400 before any session opens
"""

import json

from claude_agent_sdk import ProcessError

from tests.services.mock_agent_runtime import (
    MockAgentRuntime, mixed_message, result_message, text_message, usage,
)

URL = "/api/v1/agent/stream"
NAVIGATE = "mcp__chrome-devtools__navigate_page"


def _frames(body: str) -> list[dict]:
    frames = [f for f in body.split("\n\n") if f.strip()]
    assert all(f.startswith("data: ") for f in frames)
    return [json.loads(f[len("data: "):]) for f in frames]


async def test_stream_emits_sse_frames_in_order(client, set_runtime):
    runtime = set_runtime(MockAgentRuntime([
        mixed_message(
            [("text", "Searching..."), ("tool", NAVIGATE)], usage=usage(50, 10),
        ),
        result_message("Found 3 options..."),
    ]))

    resp = await client.post(URL, json={"prompt": "find wireless earbuds under $50"})

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/event-stream")
    assert resp.headers["cache-control"] == "no-cache"
    assert resp.headers["x-accel-buffering"] == "no"
    assert _frames(resp.text) == [
        {"type": "text", "text": "Searching..."},
        {"type": "tool", "name": NAVIGATE},
        {"type": "usage", "input": 50, "output": 10},
        {"type": "result", "text": "Found 3 options..."},
        {"type": "done"},
    ]
    assert runtime.calls[0][0] == "find wireless earbuds under $50"


async def test_sdk_failure_becomes_runtime_error_frame(client, set_runtime):
    set_runtime(MockAgentRuntime(
        [text_message("one"), text_message("two")],
        fail_after=ProcessError("chrome-devtools-mcp exited", exit_code=1),
    ))

    resp = await client.post(URL, json={"prompt": "lamp"})

    frames = _frames(resp.text)
    assert frames[:2] == [
        {"type": "text", "text": "one"},
        {"type": "text", "text": "two"},
    ]
    assert len(frames) == 3
    assert frames[2]["type"] == "error"
    assert frames[2]["data"]["code"] == "AGENT_RUNTIME_ERROR"
    assert all(f["type"] != "done" for f in frames)


async def test_unexpected_failure_becomes_internal_error_frame(client, set_runtime):
    set_runtime(MockAgentRuntime([], fail_after=KeyError("secret-internal")))

    resp = await client.post(URL, json={"prompt": "lamp"})

    frames = _frames(resp.text)
    assert len(frames) == 1
    assert frames[0]["data"]["code"] == "INTERNAL_ERROR"
    assert "secret-internal" not in resp.text


async def test_blank_prompt_rejected(client, set_runtime):
    runtime = set_runtime(MockAgentRuntime([]))

    resp = await client.post(URL, json={"prompt": "   "})

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"
    assert runtime.calls == []


async def test_oversized_prompt_rejected(client, set_runtime, monkeypatch):
    monkeypatch.setenv("MAX_PROMPT_CHARS", "10")
    runtime = set_runtime(MockAgentRuntime([]))

    resp = await client.post(URL, json={"prompt": "a very long shopping request"})

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "INVALID_PROMPT"
    assert runtime.calls == []


async def test_health(client):
    resp = await client.get("/api/v1/health/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"
