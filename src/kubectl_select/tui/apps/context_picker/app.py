"""Main Textual application for picking a kubeconfig context.

The app only reports which row was activated; switching contexts is left to
the caller once the terminal has been restored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual import on
from textual.app import App
from textual.binding import Binding

from kubectl_select.tui.apps.context_picker.screens import ContextListScreen

if TYPE_CHECKING:
    from kubectl_select.core.config.models import ConfigSnapshot


class ContextPickerApp(App[int | None]):
    """TUI application presenting contexts in a selectable table.

    Exits with the activated row index (0 is the header row) or ``None``
    when the user quits.

    Args:
        snapshot: Kubeconfig snapshot to display.
    """

    TITLE = "kubectl-select"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=False),
        Binding("escape", "quit", "Quit", show=False),
    ]

    def __init__(self, snapshot: ConfigSnapshot) -> None:
        """Initialize the context picker app.

        Args:
            snapshot: Kubeconfig snapshot to display.
        """
        super().__init__()
        self._snapshot = snapshot

    def on_mount(self) -> None:
        """Push the context list screen on mount."""
        self.push_screen(ContextListScreen(snapshot=self._snapshot))

    async def action_quit(self) -> None:
        """Quit without choosing a row."""
        self.exit(None)

    @on(ContextListScreen.ContextActivated)
    def handle_context_activated(self, event: ContextListScreen.ContextActivated) -> None:
        """Finish with the activated row."""
        self.exit(event.row)
