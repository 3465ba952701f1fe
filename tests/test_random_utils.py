"""
Tests for random utilities.
"""

import unittest

import numpy as np

from pop_pipelines.random_utils import make_rng, random_int, random_string


class TestRandomInt(unittest.TestCase):
    """Test cases for random_int."""

    def setUp(self):
        self.rng = make_rng(42)

    def test_within_inclusive_bounds(self):
        values = [random_int(5, 10, self.rng) for _ in range(2000)]
        self.assertTrue(all(5 <= v <= 10 for v in values))
        # Both endpoints are reachable
        self.assertEqual(set(values), set(range(5, 11)))

    def test_returns_python_int(self):
        self.assertIsInstance(random_int(1, 2, self.rng), int)

    def test_single_value_range(self):
        self.assertEqual(random_int(7, 7, self.rng), 7)

    def test_default_generator(self):
        value = random_int(1, 3)
        self.assertIn(value, (1, 2, 3))

    def test_invalid_bounds(self):
        with self.assertRaises(ValueError):
            random_int(10, 5, self.rng)

    def test_reproducibility(self):
        first = [random_int(0, 100, make_rng(3)) for _ in range(5)]
        second = [random_int(0, 100, make_rng(3)) for _ in range(5)]
        self.assertEqual(first, second)


class TestRandomString(unittest.TestCase):
    """Test cases for random_string."""

    def setUp(self):
        self.rng = make_rng(42)

    def test_length_and_range(self):
        text = random_string("a", "z", 50, self.rng)
        self.assertEqual(len(text), 50)
        self.assertTrue(all("a" <= c <= "z" for c in text))

    def test_zero_length(self):
        self.assertEqual(random_string("a", "z", 0, self.rng), "")

    def test_single_character_range(self):
        self.assertEqual(random_string("q", "q", 4, self.rng), "qqqq")

    def test_upper_bound_reachable(self):
        text = random_string("a", "b", 500, self.rng)
        self.assertEqual(set(text), {"a", "b"})

    def test_seeded_generators_match(self):
        self.assertEqual(random_string("a", "z", 20, make_rng(9)),
                         random_string("a", "z", 20, make_rng(9)))

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            random_string("z", "a", 3, self.rng)
        with self.assertRaises(ValueError):
            random_string("a", "z", -1, self.rng)
        with self.assertRaises(ValueError):
            random_string("ab", "z", 3, self.rng)


class TestMakeRng(unittest.TestCase):

    def test_returns_generator(self):
        self.assertIsInstance(make_rng(1), np.random.Generator)


if __name__ == '__main__':
    unittest.main()
