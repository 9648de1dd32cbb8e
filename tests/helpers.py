from __future__ import annotations

import json
from dataclasses import dataclass, field

import httpx


def completion_json(content: str = "Hello there!") -> dict:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "model": "deepseek-chat",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 5, "completion_tokens": 3, "total_tokens": 8},
    }


@dataclass
class RecordingHandler:
    """httpx.MockTransport handler that records requests and replies with canned JSON."""

    reply_status: int = 200
    reply_json: dict | None = None
    # Raw body sent instead of reply_json, e.g. an event stream.
    reply_body: bytes | None = None
    reply_headers: dict[str, str] = field(default_factory=dict)
    error: Exception | None = None
    requests: list[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.reply_body is not None:
            return httpx.Response(
                self.reply_status, content=self.reply_body, headers=self.reply_headers
            )
        return httpx.Response(self.reply_status, json=self.reply_json or completion_json())

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request recorded"
        return self.requests[-1]

    @property
    def last_body(self) -> dict:
        return json.loads(self.last.content.decode("utf-8"))

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)
