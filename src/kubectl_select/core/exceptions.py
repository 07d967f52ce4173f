"""Custom exceptions for context selection."""

from __future__ import annotations


class KubectlSelectError(Exception):
    """Base exception for kubectl-select operations.

    Attributes:
        message: Human-readable error message.
    """

    def __init__(self, message: str) -> None:
        """Initialize KubectlSelectError.

        Args:
            message: Human-readable error message.
        """
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message


class CommandError(KubectlSelectError):
    """Raised when an external command cannot be started or exits non-zero.

    Attributes:
        command: The command line that was run.
        returncode: Exit status of the child, or None if it never started.
        original_error: The underlying exception.
    """

    def __init__(
        self,
        message: str,
        command: str = "",
        returncode: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize CommandError.

        Args:
            message: Human-readable error message.
            command: The command line that failed.
            returncode: Exit status of the child process.
            original_error: The original exception that caused this error.
        """
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.original_error = original_error

    def __str__(self) -> str:
        """Return string representation including the command."""
        if self.command:
            return f"{self.message} [{self.command}]"
        return self.message


class ConfigLoadError(KubectlSelectError):
    """Raised when the kubeconfig view cannot be fetched or decoded."""

    def __init__(
        self,
        message: str = "Failed to load kubeconfig",
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.original_error = original_error


class SelectionAbortedError(KubectlSelectError):
    """Raised when the user leaves the picker without choosing a context."""

    def __init__(self, message: str = "no context was chosen") -> None:
        super().__init__(message)


class ApplyError(KubectlSelectError):
    """Raised when switching to the chosen context fails.

    Attributes:
        context_name: The context that could not be activated.
        original_error: The underlying command failure.
    """

    def __init__(
        self,
        message: str,
        context_name: str,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context_name = context_name
        self.original_error = original_error


class RenderError(KubectlSelectError):
    """Raised when the interactive table fails to start or crashes."""

    def __init__(
        self,
        message: str = "Interactive table failed",
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.original_error = original_error
