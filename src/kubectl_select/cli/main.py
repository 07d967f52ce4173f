"""Main CLI entry point using Typer."""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console

from kubectl_select import __version__
from kubectl_select.cli.errors import err_console, handle_error
from kubectl_select.core.config import SelectorSettings, load_config
from kubectl_select.core.exceptions import KubectlSelectError
from kubectl_select.core.kubectl import KubectlClient
from kubectl_select.logging.config import configure_logging
from kubectl_select.strategies import SelectionOutcome, StrategyKind, create_strategy

app = typer.Typer(
    name="kubectl-select",
    help="Interactively pick a kubeconfig context and make it current.",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"kubectl-select version {__version__}")
        raise typer.Exit()


def report_outcome(outcome: SelectionOutcome) -> None:
    """Print the outcome of a selection run."""
    if outcome.reason:
        err_console.print(f"failed to select: {outcome.reason}", markup=False, highlight=False)
    if outcome.message:
        console.print(outcome.message, markup=False, highlight=False)


@app.command()
def main(
    mode: StrategyKind | None = typer.Option(
        None,
        "--mode",
        "-m",
        case_sensitive=False,
        help="Picker to use: fzf or table (default from KUBECTL_SELECT_MODE, else fzf).",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode.",
    ),
) -> None:
    """Pick a context from the kubeconfig and switch to it."""
    configure_logging(verbose=verbose, debug=debug)

    try:
        settings = SelectorSettings.from_env()
    except ValidationError as e:
        err_console.print("[red]Error:[/red] Invalid KUBECTL_SELECT_* setting")
        err_console.print(f"  {e}", markup=False)
        raise typer.Exit(1) from e

    kind = mode or StrategyKind(settings.mode)
    client = KubectlClient(binary=settings.kubectl)

    try:
        snapshot = load_config(client)
        outcome = create_strategy(kind, client, settings).run_selection(snapshot)
    except KubectlSelectError as e:
        handle_error(e)
        return

    report_outcome(outcome)


if __name__ == "__main__":
    app()
