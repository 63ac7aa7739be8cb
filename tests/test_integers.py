import math
import unittest

from dynfrac import integers
from dynfrac.errors import InvalidArgument, ParseError


class TestIntegers(unittest.TestCase):

    def test_parse(self):
        self.assertEqual(integers.parse('42'), 42)
        self.assertEqual(integers.parse('-17'), -17)
        self.assertEqual(integers.parse('+5'), 5)
        self.assertEqual(integers.parse('123456789012345678901234567890'), 123456789012345678901234567890)
        self.assertEqual(integers.parse('ff', 16), 255)
        self.assertEqual(integers.parse('-Z', 36), -35)

    def test_parse_strict(self):
        for text in ['', ' 1', '1 ', '1_000', '0x10', '1.5', '--1', '+', 'abc', '١٢']:
            with self.assertRaises(ParseError, msg=text):
                integers.parse(text)
        with self.assertRaises(ParseError):
            integers.parse('2', 2)
        with self.assertRaises(InvalidArgument):
            integers.parse('1', 37)

    def test_render(self):
        self.assertEqual(integers.render(-255), '-255')
        self.assertEqual(integers.render(255, 16), 'ff')
        self.assertEqual(integers.render(-5, 2), '-101')
        self.assertEqual(integers.render(0, 7), '0')
        for base in (2, 3, 10, 16, 36):
            for value in (-1000, -1, 0, 1, 35, 2**70):
                self.assertEqual(integers.parse(integers.render(value, base), base), value)

    def test_to_double(self):
        self.assertEqual(integers.to_double(3), 3.0)
        self.assertEqual(integers.to_double(10**400), math.inf)
        self.assertEqual(integers.to_double(-10**400), -math.inf)

    def test_true_div(self):
        self.assertEqual(integers.true_div(3, 4), 0.75)
        self.assertEqual(integers.true_div(10**400, 7), math.inf)
        self.assertEqual(integers.true_div(-10**400, 7), -math.inf)
        self.assertEqual(integers.true_div(10**400, -7), -math.inf)
        self.assertEqual(integers.true_div(1, 10**400), 0.0)

    def test_fixed_width(self):
        self.assertEqual(integers.to_fixed_width(2**31 - 1, 32), (True, 2**31 - 1))
        self.assertEqual(integers.to_fixed_width(2**31, 32), (False, 0))
        self.assertEqual(integers.to_fixed_width(-2**63, 64), (True, -2**63))
        self.assertFalse(integers.fits_int64(2**63))
        self.assertTrue(integers.fits_int32(integers.INT32_MIN))
        self.assertFalse(integers.fits_int32(integers.INT32_MIN - 1))

    def test_floor_div_gcd_compare(self):
        self.assertEqual(integers.floor_div(-7, 3), -3)
        self.assertEqual(integers.floor_div(7, 3), 2)
        self.assertEqual(integers.gcd(-12, 18), 6)
        self.assertEqual(integers.gcd(0, 5), 5)
        self.assertEqual(integers.compare(1, 2), -1)
        self.assertEqual(integers.compare(2, 2), 0)
        self.assertEqual(integers.compare(3, 2), 1)
