"""
Unit tests for the .mz binary maze format.
"""

import struct

import pytest

from minotaur import Grid, generate_maze
from minotaur.exceptions import MazeFormatError
from minotaur.grid import Direction
from minotaur.utils.io import dumps, load_maze, loads, save_maze


def pack(n_cells, flags, width, height):
    return struct.pack("<Q", n_cells) + bytes(flags) + struct.pack("<QQ", width, height)


class TestLayout:
    """Test the byte layout."""

    def test_single_cell(self):
        assert dumps(Grid(1, 1)) == pack(1, [0], 1, 1)

    def test_two_by_one_corridor(self):
        grid = Grid(2, 1)
        grid.carve((0, 0), (1, 0))

        assert dumps(grid) == pack(2, [Direction.EAST, Direction.WEST], 2, 1)

    def test_row_major_cells(self):
        grid = Grid(1, 2)
        grid.carve((0, 0), (0, 1))

        assert dumps(grid) == pack(2, [Direction.SOUTH, Direction.NORTH], 1, 2)

    def test_size(self):
        data = dumps(generate_maze("Wilsons", 7, 3, seed=0))
        assert len(data) == 8 + 21 + 16


class TestRoundTrip:
    """Test save/load of generated mazes."""

    def test_loads_dumps(self, algorithm):
        grid = generate_maze(algorithm, 9, 6, seed=17)
        assert loads(dumps(grid)) == grid

    def test_file_round_trip(self, tmp_path):
        grid = generate_maze("HuntAndKill", 12, 8, seed=3)
        path = save_maze(grid, tmp_path / "out" / "maze.mz")

        assert path.exists()
        assert load_maze(path) == grid

    def test_loaded_grid_is_unvisited(self):
        grid = loads(dumps(generate_maze("RecursiveBacktracker", 4, 4, seed=1)))
        assert grid.visited_count() == 0


class TestCorruption:
    """Test malformed data detection."""

    def test_truncated_header(self):
        with pytest.raises(MazeFormatError, match="truncated"):
            loads(b"\x01\x00")

    def test_truncated_body(self):
        data = dumps(generate_maze("BinaryTree", 3, 3, seed=0))
        with pytest.raises(MazeFormatError, match="truncated"):
            loads(data[:-1])

    def test_trailing_bytes(self):
        data = dumps(generate_maze("BinaryTree", 3, 3, seed=0))
        with pytest.raises(MazeFormatError, match="trailing"):
            loads(data + b"\x00")

    def test_cell_count_mismatch(self):
        with pytest.raises(MazeFormatError, match="does not match"):
            loads(pack(2, [0, 0], 3, 1))

    @pytest.mark.parametrize(("width", "height"), [(0, 1), (1, 0)])
    def test_zero_dimension(self, width, height):
        with pytest.raises(MazeFormatError, match="positive"):
            loads(pack(0, [], width, height))

    def test_unknown_bits(self):
        with pytest.raises(MazeFormatError, match="Invalid passage flags"):
            loads(pack(1, [0x10], 1, 1))

    def test_passage_off_grid(self):
        with pytest.raises(MazeFormatError):
            loads(pack(1, [Direction.NORTH], 1, 1))

    def test_asymmetric_flags(self):
        with pytest.raises(MazeFormatError) as exc_info:
            loads(pack(2, [Direction.EAST, 0], 2, 1))

        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_error_names_source_file(self, tmp_path):
        path = tmp_path / "broken.mz"
        path.write_bytes(b"\x00" * 5)

        with pytest.raises(MazeFormatError) as exc_info:
            load_maze(path)

        assert exc_info.value.diagnostic_data["source"] == str(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_maze(tmp_path / "missing.mz")
