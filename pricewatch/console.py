"""Line-based input/output used by prompts and the monitor."""

from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console


class LineIO(ABC):
    """Read and write whole lines of text."""

    @abstractmethod
    def read_line(self, prompt: str) -> str:
        """Show a prompt and return the entered line without its newline.

        Raises:
            EOFError: If input is exhausted.
        """
        pass

    @abstractmethod
    def write_line(self, text: str) -> None:
        """Write one line of output."""
        pass


class ConsoleIO(LineIO):
    """LineIO backed by a rich Console on the real terminal."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def read_line(self, prompt: str) -> str:
        return self.console.input(prompt, markup=False, emoji=False)

    def write_line(self, text: str) -> None:
        self.console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)
