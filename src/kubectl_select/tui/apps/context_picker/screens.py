"""Screen definitions for the context picker TUI.

The table mirrors the classic kubectl-select layout: row 0 is a header row
that can itself be activated (meaning "keep the current context"), and each
following row is one context in snapshot order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual import on
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.screen import Screen
from textual.widgets import DataTable, Label

if TYPE_CHECKING:
    from kubectl_select.core.config.models import ConfigSnapshot

HEADER_ROW = ("SELECTED", "NAME", "CLUSTER", "USER")
CURRENT_MARKER = "*"
QUIT_HINT = "ESC or 'q' to QUIT"

Row = tuple[str, str, str, str]


def build_rows(snapshot: ConfigSnapshot) -> list[Row]:
    """Build the header row plus one row per context.

    Args:
        snapshot: Kubeconfig snapshot to display.

    Returns:
        ``len(snapshot.contexts) + 1`` rows; only the current context's row
        carries the marker.
    """
    rows: list[Row] = [HEADER_ROW]
    for ctx in snapshot.contexts:
        marker = CURRENT_MARKER if ctx.name == snapshot.current_context else ""
        rows.append((marker, ctx.name, ctx.cluster, ctx.user))
    return rows


def initial_row(snapshot: ConfigSnapshot) -> int:
    """Row the cursor starts on: the current context, else the header."""
    index = snapshot.current_index
    return 0 if index is None else index + 1


class ContextListScreen(Screen[None]):
    """Full-screen table of contexts with a permanent quit hint."""

    DEFAULT_CSS = """
    ContextListScreen > Vertical {
        height: 100%;
    }

    ContextListScreen #context-table {
        height: 1fr;
    }

    ContextListScreen #status-bar {
        dock: bottom;
        width: 100%;
        background: $surface;
        padding: 0 1;
    }
    """

    class ContextActivated(Message):
        """Emitted when the user activates a table row."""

        def __init__(self, row: int) -> None:
            """Initialize with the activated row.

            Args:
                row: Table row index; 0 is the header row.
            """
            self.row = row
            super().__init__()

    def __init__(self, snapshot: ConfigSnapshot) -> None:
        """Initialize the context list screen.

        Args:
            snapshot: Kubeconfig snapshot to display.
        """
        super().__init__()
        self.snapshot = snapshot

    def compose(self) -> ComposeResult:
        """Compose the screen layout."""
        yield Vertical(
            DataTable(id="context-table", show_header=False, cursor_type="row"),
            Label(f"[dim]{QUIT_HINT}[/dim]", id="status-bar"),
        )

    def on_mount(self) -> None:
        """Populate the table and place the cursor on the current context."""
        table = self.query_one("#context-table", DataTable)

        table.add_column(HEADER_ROW[0], key="selected", width=len(HEADER_ROW[0]))
        for label in HEADER_ROW[1:]:
            table.add_column(label, key=label.lower())

        header, *rows = build_rows(self.snapshot)
        table.add_row(*(Text(cell, style="bold") for cell in header), key="header")
        for i, (marker, *cells) in enumerate(rows, start=1):
            table.add_row(
                Text(marker, style="bold green"),
                *(Text(cell) for cell in cells),
                key=f"context-{i}",
            )

        table.move_cursor(row=initial_row(self.snapshot))
        table.focus()

    @on(DataTable.RowSelected)
    def handle_row_selected(self, event: DataTable.RowSelected) -> None:
        """Forward Enter on a row as a context activation."""
        event.stop()
        self.post_message(self.ContextActivated(event.cursor_row))
