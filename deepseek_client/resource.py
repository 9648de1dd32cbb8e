from __future__ import annotations

import logging

import httpx

from deepseek_client.enums import EndpointSuffix, HeaderFlag
from deepseek_client.schema import RequestPayload, Result

logger = logging.getLogger(__name__)


class Resource:
    """Issues one chat-completion POST per payload. Errors are not retried."""

    def __init__(self, http_client: httpx.Client) -> None:
        self.http_client = http_client

    def send_request(self, payload: RequestPayload) -> Result:
        logger.info(
            "deepseek: request model=%s stream=%s temperature=%s message_count=%s",
            payload.model,
            payload.stream,
            payload.temperature,
            len(payload.messages),
        )
        r = self.http_client.post(
            EndpointSuffix.CHAT.value,
            json=payload.to_body(),
            headers={HeaderFlag.CONTENT_TYPE.value: HeaderFlag.APPLICATION_JSON.value},
        )
        logger.debug("deepseek: response_status=%s", r.status_code)
        r.raise_for_status()
        return Result(status_code=r.status_code, data=r.json())
