"""User-facing reporting of fatal errors."""

from __future__ import annotations

import typer
from rich.console import Console

from kubectl_select.core.exceptions import (
    ApplyError,
    ConfigLoadError,
    KubectlSelectError,
    RenderError,
)

err_console = Console(stderr=True)


def handle_error(error: KubectlSelectError) -> None:
    """Report an unrecoverable error and exit.

    Args:
        error: The error to report.

    Raises:
        typer.Exit: Always exits with code 1.
    """
    if isinstance(error, ConfigLoadError):
        err_console.print("[red]Error:[/red] Cannot read kubeconfig")
        err_console.print(f"  {error.message}", markup=False)
        err_console.print(
            "\n[dim]Hint: Check that kubectl is installed and "
            "'kubectl config view' works.[/dim]"
        )

    elif isinstance(error, ApplyError):
        err_console.print("[red]Error:[/red] Failed to switch context")
        err_console.print(f"  {error.message}", markup=False)
        err_console.print("\n[dim]The current context was left as kubectl reported it.[/dim]")

    elif isinstance(error, RenderError):
        err_console.print("[red]Error:[/red] Interactive table failed")
        err_console.print(f"  {error.message}", markup=False)
        if error.original_error:
            err_console.print(f"  Cause: {error.original_error!r}", markup=False)

    else:
        err_console.print("[red]Error:[/red] ", end="")
        err_console.print(str(error), markup=False)

    raise typer.Exit(1)
