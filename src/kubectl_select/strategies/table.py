"""Pick a context from a full-screen Textual table."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from kubectl_select.core.exceptions import RenderError
from kubectl_select.strategies.base import SelectionOutcome, SelectionStrategy, StrategyKind
from kubectl_select.tui.apps.context_picker import ContextPickerApp

if TYPE_CHECKING:
    from kubectl_select.core.config.models import ConfigSnapshot
    from kubectl_select.core.kubectl import KubectlClient

AppFactory = Callable[["ConfigSnapshot"], ContextPickerApp]


class TableStrategy(SelectionStrategy):
    """Select a context by activating a row in the interactive table.

    Row 0 is the header row and means "keep the current context"; row ``k``
    maps to ``snapshot.contexts[k - 1]``.
    """

    kind = StrategyKind.TABLE

    def __init__(
        self,
        client: KubectlClient,
        app_factory: AppFactory = ContextPickerApp,
    ) -> None:
        """Initialize the strategy.

        Args:
            client: kubectl wrapper used to apply the pick.
            app_factory: Builds the Textual app for a snapshot.
        """
        super().__init__(client)
        self._app_factory = app_factory

    def pick_row(self, snapshot: ConfigSnapshot) -> int | None:
        """Run the table UI until the user activates a row or quits.

        Returns:
            The activated row index, or None if the user quit.

        Raises:
            RenderError: If the UI fails to start or exits abnormally.
        """
        app = self._app_factory(snapshot)
        try:
            row = app.run()
        except Exception as e:
            raise RenderError(message=f"Interactive table failed: {e}", original_error=e) from e

        if app.return_code:
            raise RenderError(message=f"Interactive table exited with status {app.return_code}")
        return row

    def run_selection(self, snapshot: ConfigSnapshot) -> SelectionOutcome:
        """Show the table and activate the chosen row's context."""
        row = self.pick_row(snapshot)

        if row is None:
            self._log.info("table_quit")
            return SelectionOutcome.quit()

        if row == 0:
            self._log.info("header_row_activated")
            return SelectionOutcome.unchanged()

        name = snapshot.contexts[row - 1].name
        self._log.debug("context_chosen", context=name, row=row)
        return self.apply(name)
