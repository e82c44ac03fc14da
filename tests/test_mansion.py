"""Tests for the mansion map."""

import dataclasses

import pytest

from detective_quest.mansion import Room, build_mansion, find_room, iter_rooms


class TestBuildMansion:
    """Test cases for the fixed mansion layout."""

    def setup_method(self):
        """Setup for each test."""
        self.root = build_mansion()

    def test_entrance_hall_is_root(self):
        """Test the map starts at the entrance hall, which has no clue."""
        assert self.root.name == "Hall de Entrada"
        assert self.root.clue == ""
        assert not self.root.has_clue

    def test_first_level(self):
        """Test the hall's children."""
        assert self.root.left.name == "Biblioteca"
        assert self.root.left.clue == "Um livro aberto com paginas rasgadas"
        assert self.root.right.name == "Cozinha"
        assert self.root.right.clue == "Uma faca com manchas de sangue"

    def test_library_wing(self):
        """Test the rooms under the library."""
        biblioteca = self.root.left
        escritorio = biblioteca.left
        sala_estar = biblioteca.right

        assert escritorio.name == "Escritorio"
        assert escritorio.clue == "Cinzas de cigarro no cinzeiro"
        assert escritorio.left.name == "Sotao"
        assert escritorio.left.clue == "Um cigarro apagado no chao"
        assert escritorio.right is None

        assert sala_estar.name == "Sala de Estar"
        assert sala_estar.clue == "Um lenco perfumado esquecido no sofa"
        assert sala_estar.left is None
        assert sala_estar.right.name == "Quarto"
        assert sala_estar.right.clue == "Frasco de perfume caro sobre a comoda"

    def test_kitchen_wing(self):
        """Test the rooms under the kitchen."""
        cozinha = self.root.right
        assert cozinha.left.name == "Despensa"
        assert not cozinha.left.has_clue
        assert cozinha.right.name == "Jardim"
        assert cozinha.right.clue == "Marcas de lama e botas sujas"

    def test_leaves(self):
        """Test which rooms are dead ends."""
        leaves = {room.name for room in iter_rooms(self.root) if room.is_leaf}
        assert leaves == {"Sotao", "Quarto", "Despensa", "Jardim"}

    def test_rooms_are_immutable(self):
        """Test rooms cannot be changed after construction."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            self.root.name = "Porao"


class TestRoomTraversal:
    """Test cases for iter_rooms and find_room."""

    def test_pre_order(self):
        """Test rooms come out in pre-order."""
        names = [room.name for room in iter_rooms(build_mansion())]
        assert names == [
            "Hall de Entrada",
            "Biblioteca",
            "Escritorio",
            "Sotao",
            "Sala de Estar",
            "Quarto",
            "Cozinha",
            "Despensa",
            "Jardim",
        ]

    def test_empty_map(self):
        """Test iterating a missing map yields nothing."""
        assert list(iter_rooms(None)) == []

    def test_find_room(self):
        """Test finding rooms by name."""
        root = build_mansion()
        assert find_room(root, "Jardim").clue == "Marcas de lama e botas sujas"
        assert find_room(root, "Porao") is None

    def test_clue_count(self):
        """Test seven of the nine rooms hold a clue."""
        rooms = list(iter_rooms(build_mansion()))
        assert len(rooms) == 9
        assert sum(1 for room in rooms if room.has_clue) == 7

    def test_custom_room(self):
        """Test a hand-built room."""
        room = Room("Porao", left=Room("Adega", "Garrafa quebrada"))
        assert not room.is_leaf
        assert room.left.has_clue
