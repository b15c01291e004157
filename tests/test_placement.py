import random
import unittest

from scripted_random import ScriptedRandom

from wordsearch.core.constants import DIRECTIONS, Direction
from wordsearch.core.exceptions import PlacementExhausted
from wordsearch.engine.filler import fill_empty_cells
from wordsearch.engine.grid import LetterGrid
from wordsearch.engine.placement import PlacementEngine

EAST = DIRECTIONS.index(Direction.EAST)
SOUTH = DIRECTIONS.index(Direction.SOUTH)


class PlacementEngineTests(unittest.TestCase):
    def test_words_sharing_a_letter_cross(self) -> None:
        grid = LetterGrid(3, 3)
        # CAT east from (0,0), then CAR south from (0,0) through the shared C.
        engine = PlacementEngine(grid, ScriptedRandom([EAST, 0, 0, SOUTH, 0, 0]))
        engine.place_all(["CAT", "CAR"])

        self.assertEqual(grid.to_jsonable(), ["CAT", "A..", "R.."])
        self.assertEqual(grid.empty_count(), 4)
        self.assertEqual([p.cells[0] for p in engine.placements], [(0, 0), (0, 0)])

    def test_conflicting_attempt_writes_nothing(self) -> None:
        grid = LetterGrid(3, 3)
        grid.write_word("CAT", 0, 0, Direction.EAST)
        before = grid.to_jsonable()

        self.assertFalse(grid.can_place("DOG", 0, 0, Direction.SOUTH))
        self.assertEqual(grid.to_jsonable(), before)

    def test_incompatible_word_is_exhausted(self) -> None:
        # With CAT across the top row, every slot for DOG crosses a letter it disagrees with.
        grid = LetterGrid(3, 3)
        engine = PlacementEngine(grid, ScriptedRandom([EAST, 0, 0], seed=11))
        engine.place("CAT")
        self.assertEqual(grid.to_jsonable()[0], "CAT")

        with self.assertRaises(PlacementExhausted) as ctx:
            engine.place("DOG")
        self.assertEqual(ctx.exception.word, "DOG")
        self.assertEqual(ctx.exception.attempts, 6)
        self.assertEqual(grid.to_jsonable(), ["CAT", "...", "..."])
        self.assertEqual(len(engine.placements), 1)

    def test_word_longer_than_grid_reports_exhaustion(self) -> None:
        grid = LetterGrid(1, 1)
        engine = PlacementEngine(grid, random.Random(0))
        with self.assertRaises(PlacementExhausted) as ctx:
            engine.place("AB")
        self.assertEqual(ctx.exception.attempts, 1)
        self.assertIn("Failed to place AB after 1 retries", str(ctx.exception))
        self.assertIsNone(grid.cell(0, 0))

    def test_retry_budget_is_the_empty_cell_count(self) -> None:
        grid = LetterGrid(3, 3)
        grid.write_word("CAT", 0, 0, Direction.EAST)
        rng = ScriptedRandom([])
        with self.assertRaises(PlacementExhausted):
            PlacementEngine(grid, rng).place("DOG")
        direction_draws = [call for call in rng.calls if call == (0, len(DIRECTIONS) - 1)]
        self.assertEqual(len(direction_draws), 6)

    def test_clashing_attempt_is_logged(self) -> None:
        grid = LetterGrid(3, 3)
        grid.write_word("CAT", 0, 0, Direction.EAST)
        engine = PlacementEngine(grid, ScriptedRandom([SOUTH, 0, 0]))

        with self.assertLogs("wordsearch.engine.placement", level="DEBUG") as logs:
            with self.assertRaises(PlacementExhausted):
                engine.place("DOG")
        self.assertTrue(any("DOG clashes at (0,0) going SOUTH" in line for line in logs.output))

    def test_full_grid_gets_no_attempts(self) -> None:
        grid = LetterGrid(2, 1)
        grid.write_word("AB", 0, 0, Direction.EAST)
        with self.assertRaises(PlacementExhausted) as ctx:
            PlacementEngine(grid, random.Random(0)).place("A")
        self.assertEqual(ctx.exception.attempts, 0)

    def test_placement_reads_back_from_grid(self) -> None:
        grid = LetterGrid(6, 6)
        engine = PlacementEngine(grid, random.Random(3))
        placement = engine.place("PYTHON")
        self.assertEqual(
            grid.read(placement.row, placement.col, placement.direction, 6), "PYTHON"
        )


class FillerTests(unittest.TestCase):
    def test_fills_every_empty_cell(self) -> None:
        grid = LetterGrid(4, 3)
        grid.write_word("CAT", 1, 0, Direction.EAST)
        filled = fill_empty_cells(grid, random.Random(5))

        self.assertEqual(filled, 9)
        self.assertEqual(grid.empty_count(), 0)
        self.assertEqual(grid.to_jsonable()[1][:3], "CAT")
        for row in grid.freeze():
            for letter in row:
                self.assertTrue("A" <= letter <= "Z")

    def test_custom_alphabet(self) -> None:
        grid = LetterGrid(3, 3)
        fill_empty_cells(grid, random.Random(1), alphabet="XY")
        self.assertTrue(set("".join(grid.to_jsonable())) <= {"X", "Y"})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
