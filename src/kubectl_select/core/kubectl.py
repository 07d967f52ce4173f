"""Thin wrapper over the two ``kubectl config`` subcommands we rely on."""

from __future__ import annotations

from collections.abc import Callable

import structlog

from kubectl_select.core.runner import run_command

logger = structlog.get_logger()

DEFAULT_KUBECTL = "kubectl"

CommandRunner = Callable[[str], bytes]


class KubectlClient:
    """Build and run ``kubectl config`` command lines.

    All reads and writes of the kubeconfig go through kubectl; this class
    never touches the file itself.
    """

    def __init__(
        self,
        binary: str = DEFAULT_KUBECTL,
        runner: CommandRunner = run_command,
    ) -> None:
        """Initialize the client.

        Args:
            binary: kubectl program name or path.
            runner: Callable that runs a command line and returns stdout bytes.
        """
        self._binary = binary
        self._runner = runner
        self._log = logger.bind(binary=binary)

    @property
    def binary(self) -> str:
        """The kubectl program being invoked."""
        return self._binary

    def view_config_command(self) -> str:
        """Command line that dumps the merged kubeconfig as JSON."""
        return f"{self._binary} config view -o json"

    def use_context_command(self, name: str) -> str:
        """Command line that makes ``name`` the current context."""
        return f"{self._binary} config use-context {name}"

    def view_config(self) -> bytes:
        """Return the raw JSON kubeconfig view.

        Raises:
            CommandError: If kubectl fails.
        """
        self._log.debug("viewing_config")
        return self._runner(self.view_config_command())

    def use_context(self, name: str) -> None:
        """Switch the current context.

        Args:
            name: Context to activate.

        Raises:
            CommandError: If kubectl fails.
        """
        self._runner(self.use_context_command(name))
        self._log.info("context_switched", context=name)
