# interactive_de/channel.py
"""
Blocking line-oriented text channel.

Every read flushes the pending prompt, blocks for one line and strips the
trailing newline. End of input and the quit sentinels raise QuitRequested.
"""

import logging
import sys
from collections.abc import Callable, Iterable
from typing import TextIO, TypeVar

import typer

from interactive_de.errors import ChannelError, QuitRequested

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_QUIT_SENTINELS = (":quit", ":q")


class LineChannel:
    """Prompt/response primitives over a pair of text streams."""

    def __init__(
        self,
        input: TextIO | None = None,
        output: TextIO | None = None,
        quit_sentinels: Iterable[str] = DEFAULT_QUIT_SENTINELS,
    ) -> None:
        self._input = input if input is not None else sys.stdin
        self._output = output if output is not None else sys.stdout
        self._quit_sentinels = frozenset(quit_sentinels)

    def echo(self, text: str = "", nl: bool = True) -> None:
        try:
            typer.echo(text, file=self._output, nl=nl)
        except OSError as e:
            raise ChannelError() from e

    def read_line(self, prompt: str) -> str:
        """
        Print prompt and read one raw line.

        Raises:
            QuitRequested: On EOF or a quit sentinel
            ChannelError: If either stream fails
        """
        self.echo(prompt, nl=False)
        try:
            self._output.flush()
            line = self._input.readline()
        except OSError as e:
            raise ChannelError() from e

        if not line:
            logger.debug("End of input reached")
            raise QuitRequested()
        if line.endswith("\n"):
            line = line[:-1]
        if line in self._quit_sentinels:
            logger.debug(f"Quit sentinel {line!r} received")
            raise QuitRequested()
        return line

    def read(self, prompt: str, parser: Callable[[str], T]) -> T:
        """Read and parse a value, re-prompting after every parse failure."""
        while True:
            line = self.read_line(prompt)
            try:
                return parser(line)
            except ValueError as e:
                self.echo(str(e))

    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question; only 'y' and 'n' are accepted."""
        while True:
            line = self.read_line(prompt)
            if line == "y":
                return True
            if line == "n":
                return False
            self.echo("Please enter y or n (or :q to quit)")
