import random
import unittest

from gridmaze import Cell, CellGraph, Direction, GridInvariantError


class CellGraphConstructionTests(unittest.TestCase):
    def test_creates_unlinked_cells_for_every_position(self) -> None:
        graph = CellGraph(3, 4)
        self.assertEqual(graph.cell_count, 12)
        self.assertEqual(len(graph.cells()), 12)
        self.assertEqual(graph.link_count, 0)
        self.assertTrue(all(not graph.links(cell) for cell in graph))

    def test_rejects_non_positive_dimensions(self) -> None:
        for rows, columns in ((0, 3), (3, 0), (-1, 2), (0, 0)):
            with self.assertRaises(ValueError):
                CellGraph(rows, columns)

    def test_cell_at_returns_none_out_of_bounds(self) -> None:
        graph = CellGraph(2, 3)
        self.assertEqual(graph.cell_at(1, 2), Cell(1, 2))
        for row, column in ((-1, 0), (0, -1), (2, 0), (0, 3)):
            self.assertIsNone(graph.cell_at(row, column))

    def test_first_and_last_cells(self) -> None:
        graph = CellGraph(4, 6)
        self.assertEqual(graph.first_cell(), Cell(0, 0))
        self.assertEqual(graph.last_cell(), Cell(3, 5))

    def test_rows_and_columns_views(self) -> None:
        graph = CellGraph(2, 3)
        self.assertEqual(graph.rows_of_cells()[1], [Cell(1, 0), Cell(1, 1), Cell(1, 2)])
        self.assertEqual(graph.columns_of_cells()[2], [Cell(0, 2), Cell(1, 2)])


class NeighborTests(unittest.TestCase):
    def setUp(self) -> None:
        self.graph = CellGraph(3, 3)

    def test_interior_cell_has_four_neighbors_in_compass_order(self) -> None:
        center = Cell(1, 1)
        self.assertEqual(
            self.graph.neighbors(center),
            [Cell(0, 1), Cell(1, 2), Cell(2, 1), Cell(1, 0)],
        )

    def test_corner_neighbors_are_absent_at_boundaries(self) -> None:
        corner = self.graph.first_cell()
        self.assertIsNone(self.graph.north(corner))
        self.assertIsNone(self.graph.west(corner))
        self.assertEqual(self.graph.east(corner), Cell(0, 1))
        self.assertEqual(self.graph.south(corner), Cell(1, 0))
        self.assertEqual(self.graph.neighbor(corner, Direction.SOUTH), Cell(1, 0))

    def test_neighbors_never_change_across_link_operations(self) -> None:
        graph = CellGraph(5, 5)
        before = {cell: graph.neighbors(cell) for cell in graph}
        rng = random.Random(11)
        for _ in range(200):
            cell = graph.random_cell(rng)
            other = graph.random_neighbor(cell, rng)
            if rng.random() < 0.5:
                graph.link(cell, other)
            else:
                graph.unlink(cell, other)
        after = {cell: graph.neighbors(cell) for cell in graph}
        self.assertEqual(before, after)

    def test_random_neighbor_of_single_cell_grid_is_none(self) -> None:
        graph = CellGraph(1, 1)
        self.assertEqual(graph.neighbors(graph.first_cell()), [])
        self.assertIsNone(graph.random_neighbor(graph.first_cell()))

    def test_random_neighbor_is_one_of_the_neighbors(self) -> None:
        rng = random.Random(5)
        center = Cell(1, 1)
        for _ in range(20):
            self.assertIn(self.graph.random_neighbor(center, rng), self.graph.neighbors(center))


class LinkTests(unittest.TestCase):
    def setUp(self) -> None:
        self.graph = CellGraph(3, 3)
        self.a = Cell(0, 0)
        self.b = Cell(0, 1)

    def test_link_is_symmetric(self) -> None:
        self.graph.link(self.a, self.b)
        self.assertTrue(self.graph.is_linked(self.a, self.b))
        self.assertTrue(self.graph.is_linked(self.b, self.a))
        self.assertEqual(self.graph.links(self.b), [self.a])
        self.assertEqual(self.graph.link_count, 1)

    def test_unlink_removes_both_directions(self) -> None:
        self.graph.link(self.a, self.b)
        self.graph.unlink(self.b, self.a)
        self.assertFalse(self.graph.is_linked(self.a, self.b))
        self.assertFalse(self.graph.is_linked(self.b, self.a))

    def test_unlink_of_unlinked_pair_changes_nothing(self) -> None:
        c = Cell(1, 0)
        self.graph.link(self.a, c)
        self.graph.unlink(self.a, self.b)
        self.assertEqual(self.graph.links(self.a), [c])
        self.assertEqual(self.graph.link_count, 1)

    def test_linking_twice_keeps_a_single_link(self) -> None:
        self.graph.link(self.a, self.b)
        self.graph.link(self.b, self.a)
        self.assertEqual(self.graph.link_count, 1)

    def test_self_link_is_rejected(self) -> None:
        with self.assertRaises(GridInvariantError):
            self.graph.link(self.a, self.a)

    def test_non_neighbor_link_is_rejected(self) -> None:
        with self.assertRaises(GridInvariantError):
            self.graph.link(self.a, Cell(2, 2))
        self.assertEqual(self.graph.link_count, 0)

    def test_foreign_cell_is_rejected(self) -> None:
        with self.assertRaises(GridInvariantError):
            self.graph.link(self.a, Cell(9, 9))
        self.assertFalse(self.graph.is_linked(self.a, Cell(9, 9)))
        self.assertNotIn(Cell(9, 9), self.graph)

    def test_links_follow_neighbor_order(self) -> None:
        center = Cell(1, 1)
        for other in (Cell(1, 0), Cell(2, 1), Cell(0, 1)):
            self.graph.link(center, other)
        self.assertEqual(self.graph.links(center), [Cell(0, 1), Cell(2, 1), Cell(1, 0)])


class RandomCellTests(unittest.TestCase):
    def test_random_cell_draws_row_then_column_from_injected_source(self) -> None:
        graph = CellGraph(4, 7)
        expected_rng = random.Random(3)
        expected = [
            Cell(expected_rng.randrange(4), expected_rng.randrange(7)) for _ in range(10)
        ]
        rng = random.Random(3)
        self.assertEqual([graph.random_cell(rng) for _ in range(10)], expected)

    def test_graph_owned_source_is_used_by_default(self) -> None:
        first = CellGraph(6, 6, rng=random.Random(42))
        second = CellGraph(6, 6, rng=random.Random(42))
        self.assertEqual(
            [first.random_cell() for _ in range(10)],
            [second.random_cell() for _ in range(10)],
        )


if __name__ == "__main__":
    unittest.main()
