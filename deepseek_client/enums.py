from __future__ import annotations

from enum import Enum


class QueryRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class QueryFlag(str, Enum):
    """Field names of the chat-completion request body."""

    MESSAGES = "messages"
    MODEL = "model"
    STREAM = "stream"
    TEMPERATURE = "temperature"


class HeaderFlag(str, Enum):
    AUTHORIZATION = "Authorization"
    CONTENT_TYPE = "Content-Type"
    APPLICATION_JSON = "application/json"
    BEARER = "Bearer"


class TemperatureValue(float, Enum):
    """Temperature presets recommended by DeepSeek per use case."""

    CODING = 0.0
    DATA_CLEANING = 1.0
    GENERAL_CONVERSATION = 1.3
    TRANSLATION = 1.3  # alias of GENERAL_CONVERSATION
    CREATIVE_WRITING = 1.5


class DataType(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    ARRAY = "array"
    OBJECT = "object"
    BOOL = "bool"
    JSON = "json"


class Model(str, Enum):
    CHAT = "deepseek-chat"
    CODER = "deepseek-coder"


class EndpointSuffix(str, Enum):
    CHAT = "/chat/completions"


class DefaultConfig(Enum):
    BASE_URL = "https://api.deepseek.com/v3"
    TIMEOUT = 30
