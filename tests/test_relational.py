import itertools
import unittest

from dynfrac.fraction import Fraction, cmp, fmin, fmax


class TestCompare(unittest.TestCase):
    def setUp(self):
        self.fracs = [Fraction(n, d) for n in (-5, -1, 0, 1, 2, 7) for d in (1, 2, 3, 6)]

    def test_examples(self):
        a, b = Fraction(1, 2), Fraction(2, 3)
        self.assertEqual(cmp(a, b), -1)
        self.assertEqual(cmp(b, a), 1)
        self.assertEqual(cmp(a, Fraction(2, 4)), 0)
        self.assertTrue(a < b)
        self.assertTrue(a <= b)
        self.assertTrue(b > a)
        self.assertTrue(b >= a)
        self.assertTrue(a != b)
        self.assertTrue(a.ne(b) and a.lt(b) and a.le(b) and b.gt(a) and b.ge(a))
        self.assertTrue(Fraction(-1, 2) < Fraction(-1, 3))

    def test_trichotomy(self):
        for a, b in itertools.product(self.fracs, repeat=2):
            self.assertEqual([a.lt(b), a.eq(b), a.gt(b)].count(True), 1)
            self.assertEqual(a.cmp(b) < 0, a < b)
            self.assertEqual(a.cmp(b) == 0, a == b)
            self.assertEqual(a.cmp(b), -b.cmp(a))
            self.assertEqual(a.cmp(b) < 0, a.to_double() < b.to_double())

    def test_int_comparison(self):
        # named methods promote ints
        self.assertTrue(Fraction(1, 2).lt(1))
        self.assertTrue(Fraction(3, 2).gt(1))
        self.assertTrue(Fraction(4, 2).eq(2))
        self.assertEqual([Fraction(2).lt(2), Fraction(2).eq(2), Fraction(2).gt(2)], [False, True, False])

    def test_operators_only_between_fractions(self):
        # no implicit conversions in operators, so lt/eq/gt can't disagree
        self.assertFalse(Fraction(2) == 2)
        self.assertTrue(Fraction(2) != 2)
        self.assertFalse(Fraction(1, 2) == 0.5)
        for op in (
            lambda a, b: a < b,
            lambda a, b: a <= b,
            lambda a, b: a > b,
            lambda a, b: a >= b,
        ):
            with self.assertRaises(TypeError):
                op(Fraction(2), 2)
            with self.assertRaises(TypeError):
                op(2, Fraction(2))
        with self.assertRaises(TypeError):
            sorted([Fraction(1, 2), 1])

    def test_sign(self):
        self.assertEqual(Fraction(3, 4).sign(), 1)
        self.assertEqual(Fraction(-3, 4).sign(), -1)
        self.assertEqual(Fraction.zero().sign(), 0)

    def test_min_max(self):
        a, b = Fraction(1, 2), Fraction(2, 3)
        lo, hi = fmin(a, b), fmax(a, b)
        self.assertEqual(lo, a)
        self.assertEqual(hi, b)
        self.assertIsNot(lo, a)
        self.assertIsNot(hi, b)
        a.release()
        self.assertEqual(str(lo), '1/2')
        c = Fraction(5)
        self.assertEqual(fmin(c, Fraction(5)), c)

    def test_predicates(self):
        self.assertTrue(Fraction(3, 3).is_one())
        self.assertFalse(Fraction(-1).is_one())
        self.assertTrue(Fraction(0, 7).is_zero())
        self.assertFalse(Fraction(0).is_positive())
        self.assertFalse(Fraction(0).is_negative())
        self.assertTrue(bool(Fraction(1, 9)))
        self.assertFalse(bool(Fraction(0)))

    def test_sorting(self):
        values = [Fraction(3, 4), Fraction(-1, 2), Fraction(1, 3), Fraction(0)]
        self.assertEqual([str(f) for f in sorted(values)], ['-1/2', '0', '1/3', '3/4'])
