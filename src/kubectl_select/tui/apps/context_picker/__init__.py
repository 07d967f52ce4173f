"""Context picker TUI.

Usage:
    from kubectl_select.tui.apps.context_picker import ContextPickerApp

    app = ContextPickerApp(snapshot=snapshot)
    row = app.run()
"""

from kubectl_select.tui.apps.context_picker.app import ContextPickerApp

__all__ = ["ContextPickerApp"]
