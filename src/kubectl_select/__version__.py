"""Version information for kubectl_select."""

__version__ = "0.1.0"
