import io
import unittest

from crossword_session.core.constants import Direction
from crossword_session.core.exceptions import FetchError
from crossword_session.core.models import Coordinate
from crossword_session.engine.session import Failure, Loading, NotAsked, Success, initial_session
from crossword_session.engine.view import (
    ClueView,
    active_clue_view,
    cell_views,
    clue_lists,
)
from crossword_session.utils.pretty import format_clues, format_state, pretty_print_state

from puzzles import mini_crossword


class CellViewTests(unittest.TestCase):
    def setUp(self) -> None:
        self.session = initial_session(mini_crossword())
        self.session.filled_letters[Coordinate(0, 0)] = "M"

    def test_flags_follow_selection_and_active_span(self) -> None:
        rows = cell_views(self.session)
        self.assertEqual(len(rows), 3)
        first, second, block = rows[0]
        self.assertTrue(first.is_selected and first.is_highlighted)
        self.assertEqual(first.number, 1)
        self.assertEqual(first.filled_character, "M")
        self.assertTrue(second.is_highlighted)
        self.assertFalse(second.is_selected)
        self.assertFalse(block.is_white or block.is_highlighted)
        self.assertIsNone(block.number)
        self.assertFalse(any(view.is_highlighted for view in rows[1]))

    def test_highlight_moves_with_direction(self) -> None:
        self.session.selected_direction = Direction.DOWN
        highlighted = [
            view.coordinate for row in cell_views(self.session) for view in row if view.is_highlighted
        ]
        self.assertEqual(highlighted, [Coordinate(0, 0), Coordinate(1, 0)])


class ClueViewTests(unittest.TestCase):
    def test_clue_lists(self) -> None:
        across, down = clue_lists(mini_crossword())
        self.assertEqual(across[0], ClueView(number_string="1", text="Pa's partner"))
        self.assertEqual([view.number_string for view in down], ["1", "2", "4"])

    def test_active_clue(self) -> None:
        session = initial_session(mini_crossword())
        self.assertEqual(active_clue_view(session), ClueView("1A", "Pa's partner"))
        session.selected_coordinate = Coordinate(2, 1)
        session.selected_direction = Direction.DOWN
        self.assertEqual(active_clue_view(session), ClueView("2D", "Performed"))
        session.selected_coordinate = Coordinate(0, 2)
        self.assertIsNone(active_clue_view(session))


class PrettyTests(unittest.TestCase):
    def test_format_session_marks_selection(self) -> None:
        session = initial_session(mini_crossword())
        session.filled_letters[Coordinate(1, 1)] = "A"
        text = format_state(Success(session))
        self.assertIn(" 0 |[.](.) # ", text)
        self.assertIn(" 1 | .  A  . ", text)
        self.assertTrue(text.endswith("1A (across): Pa's partner"))

    def test_envelope_messages(self) -> None:
        self.assertEqual(format_state(NotAsked()), "No puzzle requested.")
        self.assertEqual(format_state(Loading("mini")), "Loading puzzle mini...")
        self.assertIn("could not be loaded", format_state(Failure(FetchError("x"))))

    def test_format_clues(self) -> None:
        text = format_clues(mini_crossword())
        self.assertIn("Across\n    1. Pa's partner", text)
        self.assertIn("Down\n    1. Mother", text)

    def test_pretty_print_with_label(self) -> None:
        stream = io.StringIO()
        pretty_print_state(NotAsked(), label="State", stream=stream)
        self.assertEqual(stream.getvalue(), "State\nNo puzzle requested.\n")


if __name__ == "__main__":
    unittest.main()
