"""Shared pytest fixtures for kubectl_select tests."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
import typer
from typer.testing import CliRunner

from kubectl_select.cli.main import app
from kubectl_select.core.config.models import ConfigSnapshot
from kubectl_select.core.kubectl import KubectlClient

SnapshotFactory = Callable[..., ConfigSnapshot]


def make_config_json(
    contexts: list[tuple[str, str, str]],
    current: str = "",
) -> dict[str, Any]:
    """Build a ``kubectl config view -o json`` document.

    Args:
        contexts: (name, cluster, user) triples.
        current: Value of ``current-context``.
    """
    return {
        "kind": "Config",
        "apiVersion": "v1",
        "preferences": {},
        "clusters": [
            {"name": cluster, "cluster": {"server": "https://example"}} for _, cluster, _ in contexts
        ],
        "users": [{"name": user, "user": {}} for _, _, user in contexts],
        "contexts": [
            {"name": name, "context": {"cluster": cluster, "user": user, "namespace": "default"}}
            for name, cluster, user in contexts
        ],
        "current-context": current,
    }


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def cli_app() -> typer.Typer:
    """Return the CLI app for testing."""
    return app


@pytest.fixture
def dev_prod_config() -> dict[str, Any]:
    """Two contexts with prod current."""
    return make_config_json(
        [("dev", "dev-cluster", "dev-user"), ("prod", "prod-cluster", "prod-admin")],
        current="prod",
    )


@pytest.fixture
def dev_prod_snapshot(dev_prod_config: dict[str, Any]) -> ConfigSnapshot:
    """Snapshot decoded from ``dev_prod_config``."""
    return ConfigSnapshot.from_json(json.dumps(dev_prod_config))


@pytest.fixture
def snapshot_factory() -> SnapshotFactory:
    """Build snapshots from context names."""

    def _make(names: list[str], current: str = "") -> ConfigSnapshot:
        triples = [(name, f"{name}-cluster", f"{name}-user") for name in names]
        return ConfigSnapshot.from_json(json.dumps(make_config_json(triples, current=current)))

    return _make


@pytest.fixture
def mock_client() -> MagicMock:
    """A KubectlClient double recording use_context calls."""
    client = MagicMock(spec=KubectlClient)
    client.binary = "kubectl"
    return client


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear KUBECTL_SELECT_ overrides for each test."""
    for key in list(os.environ.keys()):
        if key.startswith("KUBECTL_SELECT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def isolate_log_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep file logging out of the real home directory."""
    log_dir = tmp_path / "logs"
    monkeypatch.setattr("kubectl_select.logging.config.LOG_DIR", log_dir)
    return log_dir


@pytest.fixture(autouse=True)
def reset_root_logger() -> Any:
    """Remove handlers added by configure_logging after each test."""
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    yield
    for handler in root.handlers:
        if handler not in original_handlers:
            handler.close()
    root.handlers = original_handlers
