"""Interactive Kubernetes context selection on top of ``kubectl config``."""

from kubectl_select.__version__ import __version__

__all__ = ["__version__"]
