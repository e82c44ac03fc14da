"""Interactive exploration of the mansion."""

import logging
from enum import Enum
from typing import Callable, List, Optional

from rich.console import Console
from rich.markup import escape

from detective_quest.clue_index import ClueIndex
from detective_quest.ledger import SuspectLedger
from detective_quest.mansion import Room
from detective_quest.player import Detective
from detective_quest.rules import classify

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Navigation keys."""
    LEFT = "e"   # esquerda
    RIGHT = "d"  # direita
    EXIT = "s"   # sair


MENU_LABELS = {
    Direction.LEFT: "Ir para a esquerda",
    Direction.RIGHT: "Ir para a direita",
    Direction.EXIT: "Sair e continuar exploracao",
}


class Explorer:
    """Walks the detective through the mansion, recording clues as rooms are entered.

    The walk keeps an explicit stack of the rooms between the entrance and the
    current position. Going left or right pushes a room, exiting pops one, and
    exiting the entrance hall ends the exploration.
    """

    def __init__(
        self,
        detective: Detective,
        clue_index: ClueIndex,
        ledger: SuspectLedger,
        console: Optional[Console] = None,
        classifier: Callable[[str], str] = classify,
    ):
        self.detective = detective
        self.clue_index = clue_index
        self.ledger = ledger
        self.console = console or Console()
        self.classifier = classifier
        self.rooms_visited: List[str] = []

    def _enter(self, room: Room) -> None:
        """Show the room and record its clue, if any."""
        self.rooms_visited.append(room.name)
        self.console.print(f"\n=== Voce esta na sala: {escape(room.name)} ===")
        logger.info(f"Entered room: {room.name}")

        if not room.has_clue:
            return

        self.console.print(f">>> Pista encontrada: {escape(room.clue)}")
        self.clue_index.add(room.clue)
        suspect = self.classifier(room.clue)
        self.ledger.associate(room.clue, suspect)
        logger.info(f"Clue '{room.clue}' points at {suspect}")

    def _options(self, room: Room) -> List[Direction]:
        options = []
        if room.left is not None:
            options.append(Direction.LEFT)
        if room.right is not None:
            options.append(Direction.RIGHT)
        options.append(Direction.EXIT)
        return options

    def _show_menu(self, options: List[Direction]) -> None:
        self.console.print("\nOpcoes:")
        for option in options:
            self.console.print(f"  {escape(f'[{option.value}]')} {MENU_LABELS[option]}")

    def _parse_choice(self, key: str, options: List[Direction]) -> Optional[Direction]:
        """Map a key to one of the offered directions, or None if it is not valid here."""
        try:
            direction = Direction(key)
        except ValueError:
            return None
        return direction if direction in options else None

    def explore(self, start: Optional[Room]) -> List[str]:
        """Run the exploration from `start` until the player exits it.

        Returns the names of the rooms entered, in order (re-entries included).
        """
        if start is None:
            self.console.print("Voce chegou a um beco sem saida.")
            return self.rooms_visited

        path: List[Room] = [start]
        self._enter(start)

        while path:
            room = path[-1]
            options = self._options(room)
            self._show_menu(options)

            key = self.detective.choose_direction(room.name, [option.value for option in options])
            direction = self._parse_choice(key, options)

            if direction is None:
                logger.debug(f"Invalid choice {key!r} in {room.name}")
                self.console.print("Opcao invalida ou caminho nao disponivel.")
            elif direction is Direction.EXIT:
                path.pop()
                logger.debug(f"Left {room.name}")
                if path:
                    self.console.print(f"\n=== Voce voltou para: {escape(path[-1].name)} ===")
            else:
                child = room.left if direction is Direction.LEFT else room.right
                path.append(child)
                self._enter(child)

        logger.info(f"Exploration finished after {len(self.rooms_visited)} room entries")
        return self.rooms_visited
