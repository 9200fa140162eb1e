"""Unit tests for the seedable random source and the draw helpers."""

import pytest

from minotaur.exceptions import MazeError, RandomSourceError
from minotaur.random_source import RandomSource, SupportsRandomRange, draw, draw_choice


class TestRandomSource:
    """Test RandomSource."""

    def test_values_in_range(self):
        source = RandomSource(seed=1)
        values = [source.next_in_range(3, 7) for _ in range(500)]

        assert all(3 <= v < 7 for v in values)
        assert set(values) == {3, 4, 5, 6}

    def test_returns_python_int(self):
        assert type(RandomSource(seed=1).next_in_range(0, 10)) is int

    def test_same_seed_same_stream(self):
        a = RandomSource(seed=42)
        b = RandomSource(seed=42)
        assert [a.next_in_range(0, 1000) for _ in range(50)] == [b.next_in_range(0, 1000) for _ in range(50)]

    def test_different_seeds_differ(self):
        a = RandomSource(seed=1)
        b = RandomSource(seed=2)
        assert [a.next_in_range(0, 1 << 30) for _ in range(10)] != [b.next_in_range(0, 1 << 30) for _ in range(10)]

    def test_entropy_seed_is_recorded(self):
        source = RandomSource()
        assert isinstance(source.seed, int)
        assert source.seed >= 0

        replay = RandomSource(seed=source.seed)
        assert [source.next_in_range(0, 100) for _ in range(20)] == [replay.next_in_range(0, 100) for _ in range(20)]

    def test_single_value_range(self):
        assert RandomSource(seed=0).next_in_range(5, 6) == 5

    @pytest.mark.parametrize(("low", "high"), [(0, 0), (3, 2)])
    def test_empty_range(self, low, high):
        with pytest.raises(ValueError, match="Empty range"):
            RandomSource(seed=0).next_in_range(low, high)

    def test_negative_seed(self):
        with pytest.raises(ValueError):
            RandomSource(seed=-1)

    @pytest.mark.parametrize("seed", [1.5, "42", True])
    def test_non_integer_seed(self, seed):
        with pytest.raises(TypeError):
            RandomSource(seed=seed)

    def test_satisfies_protocol(self):
        assert isinstance(RandomSource(seed=0), SupportsRandomRange)

    def test_repr(self):
        assert repr(RandomSource(seed=7)) == "RandomSource(seed=7)"


class TestDraw:
    """Test the contract-checking draw helpers."""

    def test_draw_passes_through(self, scripted_source):
        source = scripted_source([2])
        assert draw(source, 0, 4) == 2
        assert source.calls == [(0, 4)]

    @pytest.mark.parametrize("value", [4, -1, 10])
    def test_draw_out_of_range(self, constant_source, value):
        with pytest.raises(RandomSourceError) as exc_info:
            draw(constant_source(value), 0, 4)

        assert isinstance(exc_info.value, AssertionError)
        assert isinstance(exc_info.value, MazeError)
        assert exc_info.value.diagnostic_data == {"value": value, "low": 0, "high": 4}

    @pytest.mark.parametrize("value", [1.0, "1", None, True])
    def test_draw_non_integer(self, constant_source, value):
        with pytest.raises(RandomSourceError):
            draw(constant_source(value), 0, 4)

    def test_draw_choice(self, scripted_source):
        assert draw_choice(scripted_source([1]), ["a", "b", "c"]) == "b"

    def test_draw_choice_uses_full_range(self, scripted_source):
        source = scripted_source([0])
        draw_choice(source, (10, 20, 30, 40, 50))
        assert source.calls == [(0, 5)]
