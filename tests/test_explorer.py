"""Tests for mansion exploration."""

from detective_quest.clue_index import ClueIndex
from detective_quest.explorer import Direction, Explorer
from detective_quest.ledger import SuspectLedger
from detective_quest.mansion import Room, build_mansion
from detective_quest.player import Detective


class MockDetective(Detective):
    """Mock detective for testing."""

    def __init__(self, moves=None):
        self.moves = list(moves or [])
        self.move_index = 0
        self.offered = []

    def choose_direction(self, room_name, options):
        self.offered.append((room_name, list(options)))
        if self.move_index < len(self.moves):
            move = self.moves[self.move_index]
            self.move_index += 1
            return move
        return "s"  # Default fallback

    def name_suspect(self, roster):
        raise AssertionError("Explorer never asks for an accusation")


class TestExplorer:
    """Test cases for Explorer."""

    def _explore(self, moves, console, mansion=None):
        self.detective = MockDetective(moves)
        self.clue_index = ClueIndex()
        self.ledger = SuspectLedger()
        explorer = Explorer(self.detective, self.clue_index, self.ledger, console=console)
        return explorer.explore(mansion or build_mansion())

    def test_exit_immediately(self, console, output):
        """Test exiting the hall ends exploration with nothing collected."""
        visited = self._explore(["s"], console)
        assert visited == ["Hall de Entrada"]
        assert self.clue_index.is_empty
        assert len(self.ledger) == 0
        assert "=== Voce esta na sala: Hall de Entrada ===" in output.getvalue()

    def test_kitchen_clue_points_at_chef(self, console, output):
        """Test visiting the kitchen records one piece of evidence against the chef."""
        visited = self._explore(["d", "s", "s"], console)
        assert visited == ["Hall de Entrada", "Cozinha"]
        assert list(self.clue_index) == ["Uma faca com manchas de sangue"]
        assert self.ledger.total_for("Chef") == 1

        text = output.getvalue()
        assert ">>> Pista encontrada: Uma faca com manchas de sangue" in text
        assert "=== Voce voltou para: Hall de Entrada ===" in text

    def test_study_and_attic(self, console):
        """Test the library wing down to the attic."""
        visited = self._explore(["e", "e", "e", "s", "s", "s", "s"], console)
        assert visited == ["Hall de Entrada", "Biblioteca", "Escritorio", "Sotao"]
        assert self.ledger.total_for("Sr. Monteiro") == 2
        assert self.ledger.total_for("Bibliotecaria") == 1
        assert list(self.clue_index) == [
            "Cinzas de cigarro no cinzeiro",
            "Um cigarro apagado no chao",
            "Um livro aberto com paginas rasgadas",
        ]

    def test_return_messages_follow_the_path(self, console, output):
        """Test each exit announces the room returned to."""
        self._explore(["e", "e", "s", "s", "s"], console)
        returns = [line for line in output.getvalue().splitlines() if "Voce voltou para" in line]
        assert returns == [
            "=== Voce voltou para: Biblioteca ===",
            "=== Voce voltou para: Hall de Entrada ===",
        ]

    def test_menu_only_offers_existing_children(self, console, output):
        """Test options depend on which children exist."""
        self._explore(["e", "e", "e", "s", "s", "s", "s"], console)
        offered = dict(self.detective.offered)
        assert offered["Hall de Entrada"] == ["e", "d", "s"]
        assert offered["Escritorio"] == ["e", "s"]
        assert offered["Sotao"] == ["s"]
        assert "[d] Ir para a direita" in output.getvalue()

    def test_invalid_choice_reprompts(self, console, output):
        """Test unknown keys and missing directions change nothing."""
        # Escritorio has no right-hand room
        visited = self._explore(["x", "e", "e", "d", "?", "s", "s", "s"], console)
        assert visited == ["Hall de Entrada", "Biblioteca", "Escritorio"]
        assert output.getvalue().count("Opcao invalida ou caminho nao disponivel.") == 3

    def test_uppercase_keys_are_invalid(self, console):
        """Test keys are case-sensitive."""
        visited = self._explore(["E", "s"], console)
        assert visited == ["Hall de Entrada"]

    def test_revisiting_rerecords_evidence(self, console):
        """Test entering the same room twice records its clue twice."""
        visited = self._explore(["d", "s", "d", "s", "s"], console)
        assert visited == ["Hall de Entrada", "Cozinha", "Cozinha"]
        assert self.ledger.total_for("Chef") == 2
        assert list(self.clue_index) == ["Uma faca com manchas de sangue"]

    def test_pantry_has_no_clue(self, console):
        """Test the pantry adds nothing beyond the kitchen's clue."""
        self._explore(["d", "e", "s", "s", "s"], console)
        assert len(self.clue_index) == 1
        assert self.ledger.totals() == {"Chef": 1}

    def test_full_tour(self, console):
        """Test visiting every room once collects all seven clues."""
        moves = [
            "e", "e", "e", "s", "s",  # Biblioteca, Escritorio, Sotao, back to Biblioteca
            "d", "d", "s", "s", "s",  # Sala de Estar, Quarto, back to Hall
            "d", "e", "s", "d", "s", "s",  # Cozinha, Despensa, Jardim, back to Hall
            "s",
        ]
        visited = self._explore(moves, console)
        assert len(visited) == 9
        assert len(self.clue_index) == 7
        assert self.ledger.totals() == {
            "Sr. Monteiro": 2,
            "Sra. Oliveira": 2,
            "Jardineiro": 1,
            "Bibliotecaria": 1,
            "Chef": 1,
        }

    def test_unknown_clue(self, console):
        """Test a clue without keywords is recorded against the unknown suspect."""
        mansion = Room("Hall", right=Room("Porao", "Uma janela aberta"))
        self._explore(["d", "s", "s"], console, mansion=mansion)
        assert self.ledger.total_for("Desconhecido") == 1

    def test_missing_start(self, console, output):
        """Test exploring nothing is a dead end."""
        explorer = Explorer(MockDetective(), ClueIndex(), SuspectLedger(), console=console)
        assert explorer.explore(None) == []
        assert "Voce chegou a um beco sem saida." in output.getvalue()

    def test_custom_classifier(self, console):
        """Test the classifier can be swapped."""
        explorer = Explorer(
            MockDetective(["d", "s", "s"]),
            ClueIndex(),
            SuspectLedger(),
            console=console,
            classifier=lambda clue: "Mordomo",
        )
        explorer.explore(build_mansion())
        assert explorer.ledger.total_for("Mordomo") == 1

    def test_direction_keys(self):
        """Test the navigation keys."""
        assert Direction("e") is Direction.LEFT
        assert Direction("d") is Direction.RIGHT
        assert Direction("s") is Direction.EXIT
