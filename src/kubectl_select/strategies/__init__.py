"""Context selection strategies.

Usage:
    from kubectl_select.strategies import StrategyKind, create_strategy

    strategy = create_strategy(StrategyKind.TABLE, client)
    outcome = strategy.run_selection(snapshot)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kubectl_select.strategies.base import (
    NO_SELECTION_MESSAGE,
    OutcomeStatus,
    SelectionOutcome,
    SelectionStrategy,
    StrategyKind,
)
from kubectl_select.strategies.fuzzy import FuzzyPickerStrategy
from kubectl_select.strategies.table import TableStrategy

if TYPE_CHECKING:
    from kubectl_select.core.config.settings import SelectorSettings
    from kubectl_select.core.kubectl import KubectlClient


def create_strategy(
    kind: StrategyKind,
    client: KubectlClient,
    settings: SelectorSettings | None = None,
) -> SelectionStrategy:
    """Build the strategy for ``kind``.

    Args:
        kind: Which presentation mode to run.
        client: kubectl wrapper used to apply the pick.
        settings: Runtime settings; only the fzf fields are consulted.

    Returns:
        A ready-to-run strategy.
    """
    if kind is StrategyKind.TABLE:
        return TableStrategy(client)
    if settings is None:
        return FuzzyPickerStrategy(client)
    return FuzzyPickerStrategy(client, fzf=settings.fzf, height=settings.fzf_height)


__all__ = [
    "NO_SELECTION_MESSAGE",
    "FuzzyPickerStrategy",
    "OutcomeStatus",
    "SelectionOutcome",
    "SelectionStrategy",
    "StrategyKind",
    "TableStrategy",
    "create_strategy",
]
