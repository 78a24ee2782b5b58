"""
Unit tests for Bollinger Bands.
"""
import unittest
from decimal import Decimal
from ..indicators.bollinger import calculate_bollinger_bands
from .helpers import random_walk


class TestBollingerBands(unittest.TestCase):

    def test_population_stddev(self):
        """Bands use the population standard deviation (divide by period)."""
        result = calculate_bollinger_bands([Decimal("1"), Decimal("3")], period=2, multiplier=Decimal(2))

        self.assertIsNone(result["upper"][0])
        self.assertEqual(result["middle"][1], Decimal(2))
        self.assertEqual(result["upper"][1], Decimal(4))
        self.assertEqual(result["lower"][1], Decimal(0))
        self.assertEqual(result["width"][1], Decimal(200))

    def test_constant_series_collapses(self):
        """Zero variance collapses the bands onto the middle."""
        result = calculate_bollinger_bands([Decimal("100")] * 25)
        self.assertEqual(result["upper"][-1], Decimal(100))
        self.assertEqual(result["lower"][-1], Decimal(100))

    def test_band_ordering(self):
        """lower <= middle <= upper wherever defined."""
        result = calculate_bollinger_bands(random_walk(60, seed=9))
        self.assertTrue(all(v is None for v in result["upper"][:19]))
        for upper, middle, lower in zip(result["upper"][19:], result["middle"][19:], result["lower"][19:]):
            self.assertLessEqual(lower, middle)
            self.assertLessEqual(middle, upper)


if __name__ == '__main__':
    unittest.main()
