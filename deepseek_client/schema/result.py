from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Result(BaseModel):
    """Decoded chat-completion response."""

    status_code: int
    data: dict[str, Any] = Field(default_factory=dict)

    @property
    def content(self) -> str:
        # DeepSeek returns: choices[0].message.content
        choices = self.data.get("choices") or []
        if not choices:
            return ""
        msg = (choices[0] or {}).get("message") or {}
        return msg.get("content", "") or ""

    @property
    def model(self) -> str | None:
        return self.data.get("model")

    @property
    def usage(self) -> dict[str, Any]:
        return self.data.get("usage") or {}
