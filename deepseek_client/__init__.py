from .client import DeepseekClient
from .enums import DataType, Model, QueryRole, TemperatureValue
from .errors import ConfigurationError, DeepseekError, NoResultError
from .factory import ApiFactory, FactoryConfig
from .schema import Message, RequestPayload, Result

__all__ = [
    "ApiFactory",
    "ConfigurationError",
    "DataType",
    "DeepseekClient",
    "DeepseekError",
    "FactoryConfig",
    "Message",
    "Model",
    "NoResultError",
    "QueryRole",
    "RequestPayload",
    "Result",
    "TemperatureValue",
]
