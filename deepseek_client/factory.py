from __future__ import annotations

import logging
from dataclasses import dataclass, replace

import httpx

from deepseek_client.enums import DefaultConfig, HeaderFlag
from deepseek_client.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FactoryConfig:
    api_key: str | None = None
    base_url: str = DefaultConfig.BASE_URL.value
    timeout: float = DefaultConfig.TIMEOUT.value


class ApiFactory:
    """
    Fluent builder for the pre-configured httpx client.

    Passing None to a setter keeps the default for that option.
    """

    def __init__(self, config: FactoryConfig | None = None) -> None:
        self.config = config or FactoryConfig()
        self.transport: httpx.BaseTransport | None = None

    @classmethod
    def build(cls) -> "ApiFactory":
        return cls()

    def set_base_uri(self, base_url: str | None = None) -> "ApiFactory":
        if base_url is not None and base_url.strip():
            self.config = replace(self.config, base_url=base_url.strip().rstrip("/"))
        return self

    def set_timeout(self, timeout: float | None = None) -> "ApiFactory":
        if timeout is not None:
            self.config = replace(self.config, timeout=float(timeout))
        return self

    def set_key(self, api_key: str) -> "ApiFactory":
        self.config = replace(self.config, api_key=api_key)
        return self

    def set_transport(self, transport: httpx.BaseTransport | None) -> "ApiFactory":
        self.transport = transport
        return self

    def run(self) -> httpx.Client:
        api_key = (self.config.api_key or "").strip()
        if not api_key:
            raise ConfigurationError("DeepSeek API key is required")
        headers = {
            HeaderFlag.AUTHORIZATION.value: f"{HeaderFlag.BEARER.value} {api_key}",
            HeaderFlag.CONTENT_TYPE.value: HeaderFlag.APPLICATION_JSON.value,
        }
        logger.debug(
            "factory: http client base_url=%s timeout=%s",
            self.config.base_url,
            self.config.timeout,
        )
        return httpx.Client(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            headers=headers,
            transport=self.transport,
        )
