import unittest

from crossword_session.core.constants import Direction
from crossword_session.core.models import Cell, Clue, Coordinate
from crossword_session.engine.clues import (
    derive_span,
    get_clue_number_string,
    get_clue_text,
    get_direction_clues,
)
from crossword_session.engine.grid import Grid


def clue(direction: Direction, number: int, text: str = "") -> Clue:
    return Clue(direction=direction, number=number, text=text, span=(Coordinate(0, 0),))


class DirectionClueTests(unittest.TestCase):
    def test_filters_by_direction_preserving_order(self) -> None:
        clues = [
            clue(Direction.ACROSS, 5),
            clue(Direction.DOWN, 2),
            clue(Direction.ACROSS, 1),
            clue(Direction.DOWN, 1),
        ]
        across = get_direction_clues(Direction.ACROSS, clues)
        down = get_direction_clues(Direction.DOWN, clues)
        self.assertEqual([c.number for c in across], [5, 1])
        self.assertEqual([c.number for c in down], [2, 1])

    def test_empty_input(self) -> None:
        self.assertEqual(get_direction_clues(Direction.DOWN, []), [])

    def test_projections(self) -> None:
        entry = clue(Direction.ACROSS, 12, "Feline")
        self.assertEqual(get_clue_number_string(entry), "12")
        self.assertEqual(get_clue_text(entry), "Feline")


class DeriveSpanTests(unittest.TestCase):
    def setUp(self) -> None:
        # 1 . # 2
        # . # . .
        self.grid = Grid.from_rows(
            [
                [Cell.open(1), Cell.open(), Cell.blocked(), Cell.open(2)],
                [Cell.open(), Cell.blocked(), Cell.open(), Cell.open()],
            ]
        )

    def test_stops_at_blocked_cell(self) -> None:
        self.assertEqual(
            derive_span(self.grid, Coordinate(0, 0), Direction.ACROSS),
            (Coordinate(0, 0), Coordinate(0, 1)),
        )

    def test_stops_at_grid_edge(self) -> None:
        self.assertEqual(
            derive_span(self.grid, Coordinate(0, 3), Direction.DOWN),
            (Coordinate(0, 3), Coordinate(1, 3)),
        )
        self.assertEqual(
            derive_span(self.grid, Coordinate(0, 3), Direction.ACROSS),
            (Coordinate(0, 3),),
        )

    def test_blocked_start_yields_empty_span(self) -> None:
        self.assertEqual(derive_span(self.grid, Coordinate(0, 2), Direction.DOWN), ())


if __name__ == "__main__":
    unittest.main()
