"""
Unit tests for the Grid data model.

Tests construction, neighbor lookup, symmetric carving, visited bookkeeping
and the passage-flag view used by serialization.
"""

import pytest

import numpy as np

from minotaur.exceptions import InvalidDimensionError, MazeError, NotAdjacentError
from minotaur.grid import ALL_WALLS, DIRECTIONS, Direction, Grid


class TestDirection:
    """Test Direction flags."""

    def test_bit_values(self):
        assert Direction.NORTH == 1
        assert Direction.SOUTH == 2
        assert Direction.EAST == 4
        assert Direction.WEST == 8

    @pytest.mark.parametrize("direction", DIRECTIONS)
    def test_opposite_is_involution(self, direction):
        assert direction.opposite.opposite is direction
        assert direction.opposite is not direction

    @pytest.mark.parametrize("direction", DIRECTIONS)
    def test_opposite_deltas_cancel(self, direction):
        assert direction.dx + direction.opposite.dx == 0
        assert direction.dy + direction.opposite.dy == 0

    def test_north_is_up(self):
        assert (Direction.NORTH.dx, Direction.NORTH.dy) == (0, -1)
        assert (Direction.EAST.dx, Direction.EAST.dy) == (1, 0)


class TestGridConstruction:
    """Test Grid construction and validation."""

    def test_all_walls_closed(self):
        grid = Grid(4, 3)

        assert grid.width == 4
        assert grid.height == 3
        assert grid.num_cells == 12
        assert grid.walls.shape == (3, 4)
        assert np.all(grid.walls == ALL_WALLS)
        assert grid.is_pristine()
        assert grid.open_edge_count() == 0

    def test_all_cells_unvisited(self):
        grid = Grid(4, 3)
        assert grid.visited_count() == 0

    def test_single_cell(self):
        grid = Grid(1, 1)
        assert grid.num_cells == 1
        assert grid.neighbors((0, 0)) == []

    @pytest.mark.parametrize(("width", "height"), [(0, 5), (5, 0), (0, 0), (-1, 3), (3, -2)])
    def test_invalid_dimensions(self, width, height):
        with pytest.raises(InvalidDimensionError) as exc_info:
            Grid(width, height)

        assert exc_info.value.error_code == "INVALID_DIMENSION"
        assert isinstance(exc_info.value, ValueError)
        assert isinstance(exc_info.value, MazeError)

    @pytest.mark.parametrize(("width", "height"), [(2.5, 3), ("4", 4), (True, 3), (None, 2)])
    def test_non_integer_dimensions(self, width, height):
        with pytest.raises(InvalidDimensionError):
            Grid(width, height)

    def test_numpy_integer_dimensions(self):
        grid = Grid(np.int64(3), np.int32(2))
        assert (grid.width, grid.height) == (3, 2)

    def test_walls_view_is_read_only(self):
        grid = Grid(2, 2)
        with pytest.raises(ValueError):
            grid.walls[0, 0] = 0


class TestNeighbors:
    """Test neighbor lookup."""

    def test_neighbor_in_direction(self):
        grid = Grid(3, 3)

        assert grid.neighbor((1, 1), Direction.NORTH) == (1, 0)
        assert grid.neighbor((1, 1), Direction.SOUTH) == (1, 2)
        assert grid.neighbor((1, 1), Direction.EAST) == (2, 1)
        assert grid.neighbor((1, 1), Direction.WEST) == (0, 1)

    def test_neighbor_at_boundary_is_none(self):
        grid = Grid(3, 3)

        assert grid.neighbor((0, 0), Direction.NORTH) is None
        assert grid.neighbor((0, 0), Direction.WEST) is None
        assert grid.neighbor((2, 2), Direction.SOUTH) is None
        assert grid.neighbor((2, 2), Direction.EAST) is None

    def test_neighbors_order(self):
        grid = Grid(3, 3)
        assert grid.neighbors((1, 1)) == [(1, 0), (1, 2), (2, 1), (0, 1)]

    def test_corner_has_two_neighbors(self):
        grid = Grid(3, 3)
        assert grid.neighbors((0, 0)) == [(0, 1), (1, 0)]

    def test_out_of_range_cell(self):
        grid = Grid(3, 3)
        with pytest.raises(IndexError):
            grid.neighbors((3, 0))
        with pytest.raises(IndexError):
            grid.neighbor((0, -1), Direction.NORTH)

    def test_cells_row_major(self):
        grid = Grid(2, 2)
        assert list(grid.cells()) == [(0, 0), (1, 0), (0, 1), (1, 1)]

    def test_index_round_trip(self):
        grid = Grid(5, 4)
        for i, cell in enumerate(grid.cells()):
            assert grid.index(cell) == i
            assert grid.coords(i) == cell

        with pytest.raises(IndexError):
            grid.coords(20)


class TestCarving:
    """Test wall removal."""

    def test_carve_is_symmetric(self):
        grid = Grid(3, 3)
        grid.carve((1, 1), (2, 1))

        assert not grid.has_wall((1, 1), Direction.EAST)
        assert not grid.has_wall((2, 1), Direction.WEST)
        assert grid.is_carved((1, 1), (2, 1))
        assert grid.is_carved((2, 1), (1, 1))
        assert grid.wall_flags_consistent()
        assert grid.open_edge_count() == 1

    def test_carve_leaves_other_walls(self):
        grid = Grid(3, 3)
        grid.carve((1, 1), (1, 0))

        assert grid.has_wall((1, 1), Direction.SOUTH)
        assert grid.has_wall((1, 1), Direction.EAST)
        assert grid.has_wall((1, 1), Direction.WEST)
        assert grid.has_wall((1, 0), Direction.NORTH)

    def test_carve_twice_is_idempotent(self):
        grid = Grid(2, 1)
        grid.carve((0, 0), (1, 0))
        grid.carve((1, 0), (0, 0))

        assert grid.open_edge_count() == 1
        assert grid.wall_flags_consistent()

    @pytest.mark.parametrize("other", [(2, 2), (0, 0), (1, 2)])
    def test_carve_non_adjacent(self, other):
        grid = Grid(3, 3)
        with pytest.raises(NotAdjacentError):
            grid.carve((0, 0), other)

        assert grid.is_pristine()

    def test_carve_direction(self):
        grid = Grid(3, 3)
        assert grid.carve_direction((0, 2), Direction.NORTH) == (0, 1)
        assert grid.is_carved((0, 2), (0, 1))

    def test_carve_direction_through_boundary(self):
        grid = Grid(3, 3)
        with pytest.raises(NotAdjacentError):
            grid.carve_direction((2, 0), Direction.EAST)

    def test_boundary_walls_always_present(self):
        grid = Grid(2, 2)
        grid.carve((0, 0), (1, 0))
        grid.carve((0, 0), (0, 1))

        assert grid.has_wall((0, 0), Direction.NORTH)
        assert grid.has_wall((0, 0), Direction.WEST)

    def test_is_carved_false_for_non_adjacent(self):
        grid = Grid(3, 3)
        assert not grid.is_carved((0, 0), (2, 2))

    def test_direction_between(self):
        grid = Grid(3, 3)
        assert grid.direction_between((1, 1), (1, 0)) is Direction.NORTH
        assert grid.direction_between((1, 1), (0, 1)) is Direction.WEST


class TestVisited:
    """Test visited bookkeeping."""

    def test_mark_and_reset(self):
        grid = Grid(3, 2)
        grid.mark_visited((0, 0))
        grid.mark_visited((2, 1))

        assert grid.is_visited((0, 0))
        assert not grid.is_visited((1, 0))
        assert grid.visited_count() == 2

        grid.reset_visited()
        assert grid.visited_count() == 0

    def test_visited_does_not_touch_walls(self):
        grid = Grid(3, 2)
        grid.mark_visited((1, 1))
        assert grid.is_pristine()

    def test_visited_and_unvisited_neighbors(self):
        grid = Grid(3, 3)
        grid.mark_visited((1, 0))
        grid.mark_visited((0, 1))

        assert grid.visited_neighbors((1, 1)) == [(1, 0), (0, 1)]
        assert grid.unvisited_neighbors((1, 1)) == [(1, 2), (2, 1)]


class TestPassageFlags:
    """Test the open-direction view of the walls."""

    def test_pristine_has_no_passages(self):
        grid = Grid(3, 2)
        np.testing.assert_array_equal(grid.passage_flags(), np.zeros((2, 3), dtype=np.uint8))

    def test_flags_after_carving(self):
        grid = Grid(2, 2)
        grid.carve((0, 0), (1, 0))
        grid.carve((1, 0), (1, 1))

        expected = np.array(
            [
                [Direction.EAST, Direction.WEST | Direction.SOUTH],
                [0, Direction.NORTH],
            ],
            dtype=np.uint8,
        )
        np.testing.assert_array_equal(grid.passage_flags(), expected)

    def test_from_passage_flags_rebuilds_grid(self):
        grid = Grid(3, 2)
        grid.carve((0, 0), (1, 0))
        grid.carve((1, 0), (1, 1))
        grid.carve((1, 1), (2, 1))

        rebuilt = Grid.from_passage_flags(grid.passage_flags())
        assert rebuilt == grid

    def test_from_passage_flags_rejects_asymmetric(self):
        flags = np.array([[Direction.EAST, 0]], dtype=np.uint8)
        with pytest.raises(ValueError, match="asymmetric"):
            Grid.from_passage_flags(flags)

    def test_from_passage_flags_rejects_boundary_opening(self):
        flags = np.array([[Direction.NORTH]], dtype=np.uint8)
        with pytest.raises(ValueError):
            Grid.from_passage_flags(flags)

    def test_from_passage_flags_rejects_unknown_bits(self):
        with pytest.raises(ValueError, match="bits"):
            Grid.from_passage_flags(np.array([[16]]))

    def test_from_passage_flags_rejects_wrong_shape(self):
        with pytest.raises(ValueError, match="2-dimensional"):
            Grid.from_passage_flags(np.zeros(4, dtype=np.uint8))


class TestGridValueSemantics:
    """Test copy and equality."""

    def test_equality_ignores_visited(self):
        a = Grid(2, 2)
        b = Grid(2, 2)
        b.mark_visited((0, 0))
        assert a == b

    def test_equality_depends_on_walls_and_size(self):
        a = Grid(2, 2)
        b = Grid(2, 2)
        b.carve((0, 0), (1, 0))

        assert a != b
        assert Grid(2, 3) != Grid(3, 2)

    def test_copy_is_independent(self):
        original = Grid(2, 2)
        clone = original.copy()
        clone.carve((0, 0), (1, 0))

        assert original.is_pristine()
        assert not clone.is_pristine()

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Grid(1, 1))

    def test_repr(self):
        assert repr(Grid(3, 2)) == "Grid(width=3, height=2, open_edges=0)"

    def test_str_is_ascii_art(self):
        assert str(Grid(1, 1)) == "+---+\n|   |\n+---+\n"
