"""Final accusation and verdict."""

import logging
from dataclasses import dataclass
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from detective_quest.clue_index import ClueIndex
from detective_quest.ledger import SuspectLedger
from detective_quest.player import Detective

logger = logging.getLogger(__name__)

# Minimum evidence for the judge to accept an accusation
ACCUSATION_THRESHOLD = 2

RULE = "=" * 40


@dataclass
class Verdict:
    """Outcome of an accusation."""
    accused: str
    evidence: int

    @property
    def solved(self) -> bool:
        return self.evidence >= ACCUSATION_THRESHOLD


def judge(ledger: SuspectLedger, accused: str) -> Verdict:
    """Weigh the evidence against the accused."""
    verdict = Verdict(accused=accused, evidence=ledger.total_for(accused))
    logger.info(
        f"Accused {accused!r} with {verdict.evidence} clue(s): "
        f"{'solved' if verdict.solved else 'insufficient evidence'}"
    )
    return verdict


def display_clues(clue_index: ClueIndex, ledger: SuspectLedger, console: Console) -> None:
    """List the collected clues alphabetically, with the suspect each points at.

    A clue found more than once shows how many times it was recorded.
    """
    console.print("\nPistas coletadas durante a investigacao:")
    for clue in clue_index:
        suspect = ledger.find_primary_suspect(clue)
        suffix = ""
        if suspect:
            count = dict(ledger.suspects_for(clue)).get(suspect, 0)
            marks = f", {count}x" if count > 1 else ""
            suffix = f" [dim]({escape(suspect)}{marks})[/dim]"
        console.print(f"  - {escape(clue)}{suffix}")


def display_roster(roster: List[str], console: Console) -> None:
    console.print("\n\nSuspeitos conhecidos:")
    for number, name in enumerate(roster, start=1):
        console.print(f"  {number}. {escape(name)}")


def display_verdict(verdict: Verdict, console: Console) -> None:
    """Print the judge's decision."""
    accused = escape(verdict.accused)
    console.print(f"\n{RULE}")
    console.print("[bold]VEREDITO[/bold]")
    console.print(RULE)
    console.print(f"Pistas apontando para {accused}: {verdict.evidence}")

    if verdict.solved:
        console.print("\n[green]Parabens! Voce reuniu evidencias suficientes![/green]")
        console.print(f"O juiz aceita sua acusacao contra {accused}.")
        console.print("O caso foi resolvido com sucesso!")
    else:
        console.print("\n[red]Evidencias insuficientes![/red]")
        console.print(
            f"Voce precisa de pelo menos {ACCUSATION_THRESHOLD} pistas para sustentar a acusacao."
        )
        console.print("O caso permanece em aberto...")
    console.print(RULE)


def run_accusation(
    clue_index: ClueIndex,
    ledger: SuspectLedger,
    roster: List[str],
    detective: Detective,
    console: Optional[Console] = None,
) -> Verdict:
    """Run the accusation phase: show the case, read the accused, judge."""
    console = console or Console()
    console.print(f"\n\n{RULE}")
    console.print("[bold]FASE FINAL: ACUSACAO[/bold]")
    console.print(RULE)

    display_clues(clue_index, ledger, console)
    display_roster(roster, console)

    accused = detective.name_suspect(roster)
    verdict = judge(ledger, accused)
    display_verdict(verdict, console)
    return verdict
