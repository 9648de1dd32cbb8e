from __future__ import annotations

import logging

import httpx

from deepseek_client.config import Settings
from deepseek_client.enums import Model, QueryRole, TemperatureValue
from deepseek_client.errors import NoResultError
from deepseek_client.factory import ApiFactory
from deepseek_client.resource import Resource
from deepseek_client.schema import Message, RequestPayload, Result

logger = logging.getLogger(__name__)


class DeepseekClient:
    """
    Fluent chat-completion client.

    Builder methods mutate this instance and return it, so calls chain:

        client.query("You are terse.", "system").query("Hello").run()

    run() sends the buffered messages and empties the buffer; model, stream
    and temperature carry over to the next run().
    """

    def __init__(self, http_client: httpx.Client) -> None:
        self.http_client = http_client
        self._messages: list[Message] = []
        self.model: str | None = None
        self.stream: bool = False
        self.temperature: float = TemperatureValue.GENERAL_CONVERSATION.value
        self._result: Result | None = None

    @classmethod
    def build(
        cls,
        api_key: str,
        base_url: str | None = None,
        timeout: float | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> "DeepseekClient":
        http_client = (
            ApiFactory.build()
            .set_base_uri(base_url)
            .set_timeout(timeout)
            .set_key(api_key)
            .set_transport(transport)
            .run()
        )
        return cls(http_client)

    @classmethod
    def from_settings(
        cls, settings: Settings, *, transport: httpx.BaseTransport | None = None
    ) -> "DeepseekClient":
        client = cls.build(
            settings.api_key or "",
            settings.base_url,
            settings.timeout,
            transport=transport,
        )
        return client.with_model(settings.model).set_temperature(settings.temperature)

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def query(self, content: str, role: str | QueryRole | None = None) -> "DeepseekClient":
        if isinstance(role, QueryRole):
            role = role.value
        self._messages.append(Message(role=role or QueryRole.USER.value, content=content))
        return self

    def with_model(self, model: str | Model | None = None) -> "DeepseekClient":
        self.model = model.value if isinstance(model, Model) else model
        return self

    def with_chat(self) -> "DeepseekClient":
        return self.with_model(Model.CHAT)

    def with_coder(self) -> "DeepseekClient":
        return self.with_model(Model.CODER)

    def with_stream(self, stream: bool = True) -> "DeepseekClient":
        self.stream = stream
        return self

    def set_temperature(self, temperature: float) -> "DeepseekClient":
        self.temperature = float(temperature)
        return self

    def run(self) -> str:
        payload = RequestPayload(
            messages=list(self._messages),
            model=self.model,
            stream=self.stream,
            temperature=self.temperature,
        )
        # Cleared before sending: a failed request drops the buffered messages.
        self._messages = []
        logger.debug("client: flushed %s buffered messages", len(payload.messages))
        self._result = Resource(self.http_client).send_request(payload)
        return self._result.content

    def get_result(self) -> Result:
        if self._result is None:
            raise NoResultError("no result available; call run() first")
        return self._result

    def close(self) -> None:
        self.http_client.close()

    def __enter__(self) -> "DeepseekClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
