"""Unit tests for the context list screen and its row helpers."""

from __future__ import annotations

from typing import Any

import pytest
from textual.widgets import DataTable, Label

from kubectl_select.core.config.models import ConfigSnapshot
from kubectl_select.tui.apps.context_picker import ContextPickerApp
from kubectl_select.tui.apps.context_picker.screens import (
    CURRENT_MARKER,
    HEADER_ROW,
    QUIT_HINT,
    ContextListScreen,
    build_rows,
    initial_row,
)


def _cells(table: DataTable, row: int) -> list[str]:
    return [str(cell) for cell in table.get_row_at(row)]


# ============================================================================
# Row helpers
# ============================================================================


@pytest.mark.unit
class TestBuildRows:
    """Tests for build_rows."""

    def test_header_then_contexts(self, dev_prod_snapshot: ConfigSnapshot) -> None:
        """Header first, then one row per context in snapshot order."""
        rows = build_rows(dev_prod_snapshot)

        assert rows == [
            ("SELECTED", "NAME", "CLUSTER", "USER"),
            ("", "dev", "dev-cluster", "dev-user"),
            (CURRENT_MARKER, "prod", "prod-cluster", "prod-admin"),
        ]

    @pytest.mark.parametrize("count", [0, 1, 7])
    def test_row_count(self, snapshot_factory: Any, count: int) -> None:
        """N contexts give N + 1 rows."""
        snapshot = snapshot_factory([f"ctx-{i}" for i in range(count)])
        assert len(build_rows(snapshot)) == count + 1

    def test_no_marker_without_match(self, snapshot_factory: Any) -> None:
        """A current-context naming nothing marks no row."""
        rows = build_rows(snapshot_factory(["a", "b"], current="gone"))
        assert [row[0] for row in rows[1:]] == ["", ""]

    def test_marker_only_on_current(self, snapshot_factory: Any) -> None:
        """Exactly the current row carries the marker."""
        rows = build_rows(snapshot_factory(["a", "b", "c"], current="b"))
        assert [row[0] for row in rows[1:]] == ["", CURRENT_MARKER, ""]


@pytest.mark.unit
class TestInitialRow:
    """Tests for initial_row."""

    def test_current_context_row(self, dev_prod_snapshot: ConfigSnapshot) -> None:
        """Index i in the snapshot is row i + 1."""
        assert initial_row(dev_prod_snapshot) == 2

    def test_header_without_match(self, snapshot_factory: Any) -> None:
        """With no current context the cursor starts on the header."""
        assert initial_row(snapshot_factory(["a", "b"])) == 0


# ============================================================================
# Mounted screen
# ============================================================================


class TestContextListScreen:
    """Tests for the mounted ContextListScreen."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_table_rows(self, dev_prod_snapshot: ConfigSnapshot) -> None:
        """The DataTable shows the header row followed by every context."""
        app = ContextPickerApp(snapshot=dev_prod_snapshot)

        async with app.run_test() as pilot:
            await pilot.pause()
            assert isinstance(app.screen, ContextListScreen)
            table = app.screen.query_one("#context-table", DataTable)

            assert table.row_count == 3
            assert _cells(table, 0) == list(HEADER_ROW)
            assert _cells(table, 1) == ["", "dev", "dev-cluster", "dev-user"]
            assert _cells(table, 2) == ["*", "prod", "prod-cluster", "prod-admin"]
            await pilot.press("q")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_cursor_starts_on_current(self, dev_prod_snapshot: ConfigSnapshot) -> None:
        """The current context is highlighted initially."""
        app = ContextPickerApp(snapshot=dev_prod_snapshot)

        async with app.run_test() as pilot:
            await pilot.pause()
            table = app.screen.query_one("#context-table", DataTable)

            assert table.cursor_row == 2
            assert table.has_focus
            await pilot.press("q")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_cursor_starts_on_header(self, snapshot_factory: Any) -> None:
        """Without a current context the header is highlighted."""
        app = ContextPickerApp(snapshot=snapshot_factory(["a", "b"], current="missing"))

        async with app.run_test() as pilot:
            await pilot.pause()
            table = app.screen.query_one("#context-table", DataTable)

            assert table.cursor_row == 0
            assert all(_cells(table, row)[0] == "" for row in (1, 2))
            await pilot.press("q")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_status_line(self, dev_prod_snapshot: ConfigSnapshot) -> None:
        """A permanent status line lists the quit keys."""
        app = ContextPickerApp(snapshot=dev_prod_snapshot)

        async with app.run_test() as pilot:
            await pilot.pause()
            status = app.screen.query_one("#status-bar", Label)

            assert status.display
            assert QUIT_HINT == "ESC or 'q' to QUIT"
            await pilot.press("q")
