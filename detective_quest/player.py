"""Detective (player) classes: where navigation choices and accusations come from."""

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from rich.console import Console

logger = logging.getLogger(__name__)


class Detective(ABC):
    """Abstract base class for the player of a session."""

    @abstractmethod
    def choose_direction(self, room_name: str, options: List[str]) -> str:
        """Return a single navigation key."""
        pass

    @abstractmethod
    def name_suspect(self, roster: List[str]) -> str:
        """Return the name of the accused suspect."""
        pass


class HumanDetective(Detective):
    """Human player reading from the console.

    Navigation reads one non-blank character at a time; anything else typed
    on the same line is kept and consumed by the following prompts. The
    accusation takes the rest of the pending line, or the next non-blank
    line, with surrounding whitespace removed. Prompts are printed on every
    call, including when the answer comes from text already typed.
    """

    def __init__(self, console: Optional[Console] = None, reader: Optional[Callable[[str], str]] = None):
        self.console = console or Console()
        self._reader = reader or self.console.input
        self._pending = ""

    def _read_line(self) -> str:
        line = self._reader("")
        logger.debug(f"Input line: {line!r}")
        return line

    def choose_direction(self, room_name: str, options: List[str]) -> str:
        self.console.print("Escolha: ", end="")
        while not self._pending.strip():
            self._pending = self._read_line()
        self._pending = self._pending.lstrip()
        key, self._pending = self._pending[0], self._pending[1:]
        return key

    def name_suspect(self, roster: List[str]) -> str:
        self.console.print("\nQuem voce acusa como culpado? ", end="")
        line = self._pending
        self._pending = ""
        while not line.strip():
            line = self._read_line()
        return line.strip()
