"""Common contract for the context selection strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from kubectl_select.core.exceptions import ApplyError, CommandError
from kubectl_select.logging import get_logger

if TYPE_CHECKING:
    from kubectl_select.core.config.models import ConfigSnapshot
    from kubectl_select.core.kubectl import KubectlClient

NO_SELECTION_MESSAGE = "no selection; context unchanged"


class StrategyKind(Enum):
    """Available presentation modes."""

    FZF = "fzf"
    TABLE = "table"


class OutcomeStatus(Enum):
    """How a selection run ended."""

    SELECTED = "selected"
    UNCHANGED = "unchanged"
    QUIT = "quit"


@dataclass(frozen=True)
class SelectionOutcome:
    """Result of running a strategy to completion.

    Attributes:
        status: How the run ended.
        context_name: The activated context when status is SELECTED.
        reason: Why nothing was selected, when the picker reported one.
    """

    status: OutcomeStatus
    context_name: str | None = None
    reason: str | None = None

    @classmethod
    def selected(cls, name: str) -> SelectionOutcome:
        return cls(OutcomeStatus.SELECTED, context_name=name)

    @classmethod
    def unchanged(cls, reason: str | None = None) -> SelectionOutcome:
        return cls(OutcomeStatus.UNCHANGED, reason=reason)

    @classmethod
    def quit(cls) -> SelectionOutcome:
        return cls(OutcomeStatus.QUIT)

    @property
    def message(self) -> str | None:
        """One-line confirmation for the user, or None when silent."""
        if self.status is OutcomeStatus.SELECTED:
            return f"selected {self.context_name}"
        if self.status is OutcomeStatus.UNCHANGED:
            return NO_SELECTION_MESSAGE
        return None


class SelectionStrategy(ABC):
    """Interactive flow that picks a context and activates it."""

    kind: StrategyKind

    def __init__(self, client: KubectlClient) -> None:
        """Initialize the strategy.

        Args:
            client: kubectl wrapper used to apply the pick.
        """
        self._client = client
        self._log = get_logger(__name__, strategy=self.kind.value)

    @abstractmethod
    def run_selection(self, snapshot: ConfigSnapshot) -> SelectionOutcome:
        """Let the user pick from ``snapshot`` and activate the pick.

        Raises:
            ApplyError: If switching to the chosen context fails.
            RenderError: If the interface cannot run.
        """

    def apply(self, name: str) -> SelectionOutcome:
        """Switch to ``name`` and report it.

        Raises:
            ApplyError: If kubectl refuses the switch.
        """
        try:
            self._client.use_context(name)
        except CommandError as e:
            self._log.error("context_switch_failed", context=name, error=str(e))
            raise ApplyError(
                message=f"Could not switch to context '{name}': {e}",
                context_name=name,
                original_error=e,
            ) from e
        return SelectionOutcome.selected(name)
