"""Unit tests for ring arithmetic."""

import pytest

from pastrysim.core.errors import ConfigurationError
from pastrysim.core.ring import ID_HEX_DIGITS, mod, ring_distance, shared_prefix_length, to_hex


class TestMod:
    """Tests for mod."""

    def test_negative_wraps(self):
        assert mod(-1, 5) == 4
        assert mod(-1, 20) == 19
        assert mod(-7, 5) == 3

    def test_multiple_of_n_is_zero(self):
        assert mod(5, 5) == 0
        assert mod(-10, 5) == 0

    def test_always_in_range(self):
        for n in (1, 2, 7, 20):
            for x in range(-3 * n, 3 * n):
                assert 0 <= mod(x, n) < n

    def test_non_positive_ring_rejected(self):
        with pytest.raises(ConfigurationError):
            mod(3, 0)
        with pytest.raises(ConfigurationError):
            mod(3, -4)


class TestRingDistance:
    """Tests for ring_distance."""

    def test_direct_neighbors(self):
        assert ring_distance(4, 5, 20) == 1
        assert ring_distance(5, 4, 20) == 1

    def test_wraps_around(self):
        assert ring_distance(0, 19, 20) == 1
        assert ring_distance(18, 2, 20) == 4

    def test_opposite_side(self):
        assert ring_distance(0, 10, 20) == 10

    def test_same_position(self):
        assert ring_distance(3, 3, 20) == 0


class TestHex:
    """Tests for identifier rendering."""

    def test_fixed_width(self):
        assert to_hex(0) == "0" * ID_HEX_DIGITS
        assert to_hex(1) == "0" * (ID_HEX_DIGITS - 1) + "1"
        assert len(to_hex(2 ** 128 - 1)) == ID_HEX_DIGITS

    def test_lowercase(self):
        assert to_hex(0xABC).endswith("abc")

    def test_shared_prefix_length(self):
        assert shared_prefix_length("abcd", "abef") == 2
        assert shared_prefix_length("abcd", "abcd") == 4
        assert shared_prefix_length("abcd", "bbcd") == 0
