"""Declarative agent descriptors and the bindings a harness uses to discover them."""

from .config import AgentDescriptor, Settings, get_settings
from .errors import ConfigurationError
from .model_ids import ModelIds

__all__ = [
    "AgentDescriptor",
    "ConfigurationError",
    "ModelIds",
    "Settings",
    "get_settings",
]
