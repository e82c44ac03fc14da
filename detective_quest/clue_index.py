"""Collected clues, stored in a binary search tree.

The tree deduplicates clue texts and yields them in alphabetical order.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


@dataclass
class ClueEntry:
    """A node of the clue tree."""
    text: str
    left: Optional["ClueEntry"] = None
    right: Optional["ClueEntry"] = None


def insert_clue(root: Optional[ClueEntry], text: str) -> ClueEntry:
    """Insert a clue text into the tree rooted at `root`.

    Returns the root of the resulting tree. Callers must keep the returned
    value, since inserting into an empty tree creates a new root. Inserting a
    text that is already present leaves the tree unchanged.
    """
    new_entry = ClueEntry(text)
    if root is None:
        return new_entry

    node = root
    while True:
        if text < node.text:
            if node.left is None:
                node.left = new_entry
                break
            node = node.left
        elif text > node.text:
            if node.right is None:
                node.right = new_entry
                break
            node = node.right
        else:
            break  # Duplicate
    return root


def iter_in_order(root: Optional[ClueEntry]) -> Iterator[str]:
    """Yield clue texts in ascending order (left, node, right)."""
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.text
        node = node.right


class ClueIndex:
    """Alphabetical, duplicate-free collection of discovered clues."""

    def __init__(self):
        self.root: Optional[ClueEntry] = None
        self._size = 0

    def add(self, text: str) -> bool:
        """Add a clue. Returns True if the text was not collected before."""
        if text in self:
            logger.debug(f"Clue already collected: {text}")
            return False
        self.root = insert_clue(self.root, text)
        self._size += 1
        logger.debug(f"Clue collected: {text}")
        return True

    def __contains__(self, text: object) -> bool:
        if not isinstance(text, str):
            return False
        node = self.root
        while node is not None:
            if text == node.text:
                return True
            node = node.left if text < node.text else node.right
        return False

    def __iter__(self) -> Iterator[str]:
        return iter_in_order(self.root)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self.root is not None

    @property
    def is_empty(self) -> bool:
        return self.root is None
