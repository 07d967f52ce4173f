"""Shared fixtures for integration tests.

Provides stand-in ``kubectl`` and ``fzf`` executables so the real pipe and
subprocess choreography can run without either tool installed.
"""

from __future__ import annotations

import json
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest

FAKE_KUBECTL = """#!/bin/sh
# Minimal kubectl stand-in for "config view -o json" and "config use-context".
DIR="$(dirname "$0")"
if [ "$1" = "config" ] && [ "$2" = "view" ]; then
    cat "$DIR/kubeconfig.json"
    exit 0
fi
if [ "$1" = "config" ] && [ "$2" = "use-context" ]; then
    echo "$3" >> "$DIR/use-context.log"
    if [ -f "$DIR/use-context.fail" ]; then
        echo "error: no context exists with the name: \\"$3\\"" >&2
        exit 1
    fi
    exit 0
fi
exit 2
"""

FAKE_FZF = """#!/bin/sh
# fzf stand-in: records its input and arguments, then replays a canned answer.
DIR="$(dirname "$0")"
echo "$@" > "$DIR/fzf-args"
cat > "$DIR/fzf-input"
if [ -f "$DIR/fzf-answer" ]; then
    cat "$DIR/fzf-answer"
    exit 0
fi
exit 130
"""


@dataclass
class FakeTools:
    """Paths and helpers for the stand-in executables."""

    root: Path
    kubectl: Path
    fzf: Path

    def set_config(self, config: dict[str, Any]) -> None:
        (self.root / "kubeconfig.json").write_text(json.dumps(config))

    def set_fzf_answer(self, answer: str) -> None:
        (self.root / "fzf-answer").write_text(answer)

    def fail_use_context(self) -> None:
        (self.root / "use-context.fail").touch()

    @property
    def use_context_calls(self) -> list[str]:
        log = self.root / "use-context.log"
        return log.read_text().splitlines() if log.exists() else []

    @property
    def fzf_input(self) -> list[str]:
        return (self.root / "fzf-input").read_text().splitlines()

    @property
    def fzf_args(self) -> str:
        return (self.root / "fzf-args").read_text().strip()


def _write_executable(path: Path, content: str) -> Path:
    path.write_text(content)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def fake_tools(tmp_path: Path, dev_prod_config: dict[str, Any]) -> FakeTools:
    """Install fake kubectl and fzf in a temporary directory."""
    root = tmp_path / "bin"
    root.mkdir()
    tools = FakeTools(
        root=root,
        kubectl=_write_executable(root / "kubectl", FAKE_KUBECTL),
        fzf=_write_executable(root / "fzf", FAKE_FZF),
    )
    tools.set_config(dev_prod_config)
    return tools


@pytest.fixture
def fake_tools_env(fake_tools: FakeTools, monkeypatch: pytest.MonkeyPatch) -> FakeTools:
    """Point the CLI at the fake tools through its environment overrides."""
    monkeypatch.setenv("KUBECTL_SELECT_KUBECTL", str(fake_tools.kubectl))
    monkeypatch.setenv("KUBECTL_SELECT_FZF", str(fake_tools.fzf))
    return fake_tools
