"""Kubeconfig snapshot model, loader and runtime settings."""

from kubectl_select.core.config.loader import load_config
from kubectl_select.core.config.models import ConfigSnapshot, ContextDetails, NamedContext
from kubectl_select.core.config.settings import SelectorSettings

__all__ = [
    "ConfigSnapshot",
    "ContextDetails",
    "NamedContext",
    "SelectorSettings",
    "load_config",
]
