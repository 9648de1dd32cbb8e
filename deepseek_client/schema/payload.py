from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from deepseek_client.enums import QueryFlag


class Message(BaseModel):
    # Roles are passed through as-is; the API rejects unknown ones.
    role: str
    content: str


class RequestPayload(BaseModel):
    """Snapshot of a client's state, taken once per run()."""

    messages: list[Message] = Field(default_factory=list)
    model: str | None = None
    stream: bool = False
    temperature: float

    def to_body(self) -> dict[str, Any]:
        return {
            QueryFlag.MESSAGES.value: [m.model_dump() for m in self.messages],
            QueryFlag.MODEL.value: self.model,
            QueryFlag.STREAM.value: self.stream,
            QueryFlag.TEMPERATURE.value: self.temperature,
        }
