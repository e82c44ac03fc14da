"""Detective Quest: a console mystery game set in a mansion.

The player walks a fixed binary-tree map of rooms, collects clues, and
accuses a suspect at the end. Core pieces:
- mansion: the room map (binary tree)
- clue_index: collected clues, deduplicated and kept in alphabetical order (BST)
- ledger: clue -> suspect association with per-suspect evidence counts (hash table)
- explorer / verdict: the two phases of a game session
"""

from detective_quest.game import DetectiveQuestGame

__version__ = "0.1.0"

__all__ = ["DetectiveQuestGame"]
