"""Line-oriented console input and output for the shell."""

import getpass
import sys
import warnings
from typing import Protocol, TextIO

from bank_ledger.exceptions import ConsoleUnavailableError


class Console(Protocol):
    """Blocking prompt/response channel used by the shell.

    ``read_line`` and ``read_secret`` raise ``EOFError`` when input is
    exhausted.
    """

    def write(self, text: str = "") -> None: ...

    def read_line(self, prompt: str = "") -> str: ...

    def read_secret(self, prompt: str = "") -> str: ...


class TerminalConsole:
    """Console over text streams, hiding secrets with :mod:`getpass`.

    Parameters
    ----------
    stdin : TextIO | None
        Input stream (default: ``sys.stdin`` at call time).
    stdout : TextIO | None
        Output stream (default: ``sys.stdout`` at call time).
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def write(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def read_line(self, prompt: str = "") -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def read_secret(self, prompt: str = "") -> str:
        """Read a line without echoing it.

        Raises
        ------
        ConsoleUnavailableError
            If input is not an interactive terminal, or getpass could only
            read the secret with echo turned on.
        """
        if not self.stdin.isatty():
            raise ConsoleUnavailableError(
                "No console available. Please run from a system terminal."
            )
        with warnings.catch_warnings():
            warnings.simplefilter("error", getpass.GetPassWarning)
            try:
                return getpass.getpass(prompt, stream=self.stdout)
            except getpass.GetPassWarning as e:
                raise ConsoleUnavailableError(
                    "No console available. Please run from a system terminal."
                ) from e
