from __future__ import annotations


class DeepseekError(Exception):
    pass


class ConfigurationError(DeepseekError):
    pass


class NoResultError(DeepseekError):
    pass
