"""The mansion map: a fixed binary tree of rooms."""

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True)
class Room:
    """A room in the mansion. Immutable once built."""
    name: str
    clue: str = ""  # Empty when the room holds no clue
    left: Optional["Room"] = None
    right: Optional["Room"] = None

    @property
    def has_clue(self) -> bool:
        return bool(self.clue)

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_mansion() -> Room:
    """Build the mansion map and return the entrance hall.

    Layout (clue in parentheses):

        Hall de Entrada
        ├── Biblioteca (livro)
        │   ├── Escritorio (cinzas de cigarro)
        │   │   └── Sotao (cigarro apagado)        [left]
        │   └── Sala de Estar (lenco)
        │       └── Quarto (perfume)                [right]
        └── Cozinha (faca)
            ├── Despensa
            └── Jardim (lama e botas)
    """
    # Leaves first, since rooms are frozen
    sotao = Room("Sotao", "Um cigarro apagado no chao")
    quarto = Room("Quarto", "Frasco de perfume caro sobre a comoda")

    escritorio = Room("Escritorio", "Cinzas de cigarro no cinzeiro", left=sotao)
    sala_estar = Room("Sala de Estar", "Um lenco perfumado esquecido no sofa", right=quarto)
    despensa = Room("Despensa")
    jardim = Room("Jardim", "Marcas de lama e botas sujas")

    biblioteca = Room(
        "Biblioteca", "Um livro aberto com paginas rasgadas", left=escritorio, right=sala_estar
    )
    cozinha = Room("Cozinha", "Uma faca com manchas de sangue", left=despensa, right=jardim)

    return Room("Hall de Entrada", left=biblioteca, right=cozinha)


def iter_rooms(root: Optional[Room]) -> Iterator[Room]:
    """Yield every room in pre-order (room, left subtree, right subtree)."""
    stack = [root] if root is not None else []
    while stack:
        room = stack.pop()
        yield room
        # Right pushed first so the left subtree comes out first
        if room.right is not None:
            stack.append(room.right)
        if room.left is not None:
            stack.append(room.left)


def find_room(root: Optional[Room], name: str) -> Optional[Room]:
    """Find a room by its exact name."""
    for room in iter_rooms(root):
        if room.name == name:
            return room
    return None
