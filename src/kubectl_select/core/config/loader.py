"""Load the kubeconfig snapshot through kubectl."""

from __future__ import annotations

import structlog
from pydantic import ValidationError

from kubectl_select.core.config.models import ConfigSnapshot
from kubectl_select.core.exceptions import CommandError, ConfigLoadError
from kubectl_select.core.kubectl import KubectlClient

logger = structlog.get_logger()


def load_config(client: KubectlClient | None = None) -> ConfigSnapshot:
    """Fetch and decode the current kubeconfig view.

    Args:
        client: kubectl wrapper to use. Defaults to ``kubectl`` on PATH.

    Returns:
        The decoded snapshot.

    Raises:
        ConfigLoadError: If kubectl fails or its output cannot be decoded.
    """
    client = client or KubectlClient()

    try:
        raw = client.view_config()
    except CommandError as e:
        raise ConfigLoadError(
            message=f"kubectl config view failed: {e}",
            original_error=e,
        ) from e

    try:
        snapshot = ConfigSnapshot.from_json(raw)
    except ValidationError as e:
        raise ConfigLoadError(
            message=f"Could not decode kubeconfig view: {e.error_count()} error(s)",
            original_error=e,
        ) from e

    logger.info(
        "config_loaded",
        contexts=len(snapshot.contexts),
        current_context=snapshot.current_context,
    )
    return snapshot
