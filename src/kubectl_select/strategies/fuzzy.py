"""Pick a context with the external ``fzf`` fuzzy finder.

Candidate names are streamed into an OS pipe by a writer thread while fzf
reads the other end. fzf draws its UI on stderr, which is left attached to
the terminal, and prints the chosen line on stdout, which is captured.
"""

from __future__ import annotations

import os
import subprocess
import threading
from collections.abc import Iterable
from typing import IO, TYPE_CHECKING

from kubectl_select.core.exceptions import SelectionAbortedError
from kubectl_select.strategies.base import SelectionOutcome, SelectionStrategy, StrategyKind

if TYPE_CHECKING:
    from kubectl_select.core.config.models import ConfigSnapshot
    from kubectl_select.core.kubectl import KubectlClient

DEFAULT_FZF = "fzf"
DEFAULT_FZF_HEIGHT = "20%"


class CandidatePipe:
    """Single-writer, single-reader hand-off of candidate lines.

    ``feed`` starts one writer thread that writes each candidate followed by
    a newline and then closes the write end, which is what signals end of
    input to the reader. The read end is owned by the caller and must stay
    open until the consumer process has exited.
    """

    def __init__(self) -> None:
        read_fd, write_fd = os.pipe()
        self.reader: IO[bytes] = os.fdopen(read_fd, "rb")
        self._writer: IO[bytes] = os.fdopen(write_fd, "wb")
        self._thread: threading.Thread | None = None

    def feed(self, candidates: Iterable[str]) -> None:
        """Start writing ``candidates`` in the background."""
        self._thread = threading.Thread(
            target=self._write_all,
            args=(list(candidates),),
            name="candidate-writer",
            daemon=True,
        )
        self._thread.start()

    def _write_all(self, candidates: list[str]) -> None:
        try:
            for candidate in candidates:
                self._writer.write(f"{candidate}\n".encode())
            self._writer.flush()
        except BrokenPipeError:
            pass  # reader exited before consuming everything
        finally:
            try:
                self._writer.close()
            except BrokenPipeError:
                pass

    def close(self) -> None:
        """Close the read end and wait for the writer to finish.

        Closing the read end first unblocks a writer stuck on a full pipe.
        """
        self.reader.close()
        if self._thread is not None:
            self._thread.join()

    def __enter__(self) -> CandidatePipe:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def trim_selection(output: str) -> str:
    """Strip the single trailing newline fzf appends to its selection."""
    if output.endswith("\n"):
        return output[:-1]
    return output


class FuzzyPickerStrategy(SelectionStrategy):
    """Select a context by filtering names in fzf."""

    kind = StrategyKind.FZF

    def __init__(
        self,
        client: KubectlClient,
        fzf: str = DEFAULT_FZF,
        height: str = DEFAULT_FZF_HEIGHT,
    ) -> None:
        """Initialize the strategy.

        Args:
            client: kubectl wrapper used to apply the pick.
            fzf: fzf program name or path.
            height: Value for ``fzf --height``.
        """
        super().__init__(client)
        self._fzf = fzf
        self._height = height

    @property
    def command(self) -> list[str]:
        """Argument vector used to launch fzf."""
        return [self._fzf, f"--height={self._height}"]

    def choose(self, names: list[str]) -> str:
        """Run fzf over ``names`` and return the chosen name.

        Raises:
            SelectionAbortedError: If fzf cannot start, exits non-zero or
                prints nothing.
        """
        with CandidatePipe() as pipe:
            pipe.feed(names)
            try:
                result = subprocess.run(
                    self.command,
                    stdin=pipe.reader,
                    stdout=subprocess.PIPE,
                    check=False,
                )
            except OSError as e:
                raise SelectionAbortedError(f"could not start {self._fzf}: {e.strerror or e}") from e

        if result.returncode != 0:
            raise SelectionAbortedError(f"{self._fzf} exited with status {result.returncode}")

        try:
            output = result.stdout.decode()
        except UnicodeDecodeError as e:
            raise SelectionAbortedError(f"{self._fzf} printed undecodable output: {e}") from e

        name = trim_selection(output)
        if not name:
            raise SelectionAbortedError("empty selection")
        return name

    def run_selection(self, snapshot: ConfigSnapshot) -> SelectionOutcome:
        """Pipe context names through fzf and activate the chosen one."""
        try:
            name = self.choose(snapshot.names)
        except SelectionAbortedError as e:
            self._log.info("selection_aborted", reason=e.message)
            return SelectionOutcome.unchanged(reason=e.message)

        self._log.debug("context_chosen", context=name)
        return self.apply(name)
