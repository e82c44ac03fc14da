"""Game session for Detective Quest."""

import logging
import time
import uuid
from typing import Any, Dict, Optional

from rich.console import Console

from detective_quest.clue_index import ClueIndex
from detective_quest.explorer import Explorer
from detective_quest.ledger import SuspectLedger
from detective_quest.mansion import Room, build_mansion
from detective_quest.player import Detective
from detective_quest.rules import suspect_roster
from detective_quest.verdict import run_accusation

logger = logging.getLogger(__name__)


class DetectiveQuestGame:
    """One game session.

    The session owns the mansion map, the clue index and the suspect ledger.
    Exploration fills the index and the ledger; the verdict phase only reads
    them. Nothing outlives the session.
    """

    TITLE = "DETECTIVE QUEST - MYSTERY MANSION"

    def __init__(
        self,
        detective: Detective,
        mansion: Optional[Room] = None,
        console: Optional[Console] = None,
    ):
        self.detective = detective
        self.mansion = mansion or build_mansion()
        self.console = console or Console()

        self.clue_index = ClueIndex()
        self.ledger = SuspectLedger()

        self.game_id = str(uuid.uuid4())[:8]
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None

    def display_welcome(self) -> None:
        rule = "=" * 40
        self.console.print(rule)
        self.console.print(f"[bold]   {self.TITLE}[/bold]")
        self.console.print(rule)
        self.console.print("Bem-vindo, detetive!")
        self.console.print("Explore a mansao, colete pistas e descubra o culpado.\n")

    def play(self) -> Dict[str, Any]:
        """Play a complete session and return its summary."""
        self.start_time = time.time()
        logger.info(f"Starting game {self.game_id}")
        self.display_welcome()

        explorer = Explorer(self.detective, self.clue_index, self.ledger, console=self.console)
        rooms_visited = explorer.explore(self.mansion)

        verdict = None
        if self.clue_index:
            verdict = run_accusation(
                self.clue_index,
                self.ledger,
                suspect_roster(),
                self.detective,
                console=self.console,
            )
        else:
            logger.info("No clues collected, skipping accusation")
            self.console.print("\n[yellow]Voce nao coletou nenhuma pista![/yellow]")
            self.console.print("Explore mais a mansao antes de fazer uma acusacao.")

        self.console.print("\nObrigado por jogar Detective Quest!")
        self.end_time = time.time()

        result = {
            "game_id": self.game_id,
            "rooms_visited": rooms_visited,
            "clues": list(self.clue_index),
            "evidence": self.ledger.totals(),
            "accused": verdict.accused if verdict else None,
            "evidence_for_accused": verdict.evidence if verdict else None,
            "solved": verdict.solved if verdict else None,
            "duration_seconds": self.end_time - self.start_time,
        }
        logger.info(f"Game {self.game_id} finished: {result}")
        return result
