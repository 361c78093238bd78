import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from ordering import (
    Ordering,
    natural_order,
    reverse_order,
    reversed_comparator,
    from_less_than,
    from_key,
    resolve_comparator,
)


class TestOrdering(unittest.TestCase):

    def test_of_maps_sign(self):
        self.assertIs(Ordering.of(-7), Ordering.LESS)
        self.assertIs(Ordering.of(0), Ordering.EQUAL)
        self.assertIs(Ordering.of(3), Ordering.GREATER)

    def test_reverse(self):
        self.assertIs(Ordering.LESS.reverse(), Ordering.GREATER)
        self.assertIs(Ordering.GREATER.reverse(), Ordering.LESS)
        self.assertIs(Ordering.EQUAL.reverse(), Ordering.EQUAL)

    def test_members_compare_as_ints(self):
        self.assertLess(Ordering.LESS, 0)
        self.assertEqual(Ordering.EQUAL, 0)
        self.assertGreater(Ordering.GREATER, 0)


class TestComparators(unittest.TestCase):

    def test_natural_order(self):
        self.assertIs(natural_order(1, 2), Ordering.LESS)
        self.assertIs(natural_order(2, 2), Ordering.EQUAL)
        self.assertIs(natural_order("b", "a"), Ordering.GREATER)

    def test_natural_order_unorderable_raises(self):
        with self.assertRaises(TypeError):
            natural_order(1, "a")

    def test_reverse_order(self):
        self.assertIs(reverse_order(1, 2), Ordering.GREATER)
        self.assertIs(reverse_order(2, 1), Ordering.LESS)
        self.assertIs(reverse_order(5, 5), Ordering.EQUAL)

    def test_reversed_comparator(self):
        compare = reversed_comparator(natural_order)
        self.assertIs(compare(1, 2), Ordering.GREATER)
        self.assertIs(compare(3, 3), Ordering.EQUAL)

    def test_from_less_than(self):
        compare = from_less_than(lambda a, b: a < b)
        self.assertIs(compare(1, 2), Ordering.LESS)
        self.assertIs(compare(2, 1), Ordering.GREATER)
        self.assertIs(compare(4, 4), Ordering.EQUAL)

    def test_from_less_than_calls_predicate_at_most_twice(self):
        calls = []

        def less(a, b):
            calls.append((a, b))
            return False

        self.assertIs(from_less_than(less)(1, 1), Ordering.EQUAL)
        self.assertEqual(calls, [(1, 1), (1, 1)])

    def test_from_key(self):
        compare = from_key(len)
        self.assertIs(compare("ab", "abc"), Ordering.LESS)
        self.assertIs(compare("xy", "ab"), Ordering.EQUAL)


class TestResolveComparator(unittest.TestCase):

    def test_default_is_natural_order(self):
        self.assertIs(resolve_comparator(), natural_order)

    def test_descending_default_is_reverse_order(self):
        self.assertIs(resolve_comparator(ascending=False), reverse_order)

    def test_custom_comparator_is_kept(self):
        compare = from_key(abs)
        self.assertIs(resolve_comparator(compare), compare)

    def test_custom_comparator_descending_is_inverted(self):
        compare = resolve_comparator(from_key(abs), ascending=False)
        self.assertIs(compare(-5, 2), Ordering.LESS)

    def test_non_callable_raises(self):
        with self.assertRaises(TypeError):
            resolve_comparator("not a function")


if __name__ == "__main__":
    unittest.main()
