from .payload import Message, RequestPayload
from .result import Result

__all__ = ["Message", "RequestPayload", "Result"]
