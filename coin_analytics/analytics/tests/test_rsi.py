"""
Unit tests for RSI indicator.
"""
import unittest
from decimal import Decimal
from ..indicators.rsi import wilder_rsi
from .helpers import random_walk


class TestRSI(unittest.TestCase):
    """Test RSI calculation with known test series."""

    def test_rsi_insufficient_data(self):
        """Test RSI with insufficient data."""
        closes = [Decimal("102")] * 14  # need 15 closes for RSI(14)

        result = wilder_rsi(closes, period=14)
        self.assertEqual(len(result), 14)
        self.assertTrue(all(r is None for r in result))

    def test_rsi_first_defined_index(self):
        """First RSI(14) value sits at index 14."""
        result = wilder_rsi(random_walk(15), period=14)
        self.assertIsNone(result[13])
        self.assertIsNotNone(result[14])

    def test_rsi_all_gains(self):
        """Strictly rising closes give RSI 100."""
        closes = [Decimal("100") + Decimal(str(i)) for i in range(20)]
        result = wilder_rsi(closes, period=14)
        self.assertEqual(result[-1], Decimal(100))

    def test_rsi_all_losses(self):
        """Strictly falling closes give RSI 0."""
        closes = [Decimal("100") - Decimal(str(i)) for i in range(20)]
        result = wilder_rsi(closes, period=14)
        self.assertEqual(result[-1], Decimal(0))

    def test_rsi_flat_series(self):
        """No losses at all means RSI 100, including a flat series."""
        result = wilder_rsi([Decimal("100")] * 40, period=14)
        self.assertTrue(all(r == Decimal(100) for r in result[14:]))

    def test_rsi_wilders_smoothing(self):
        """Test that RSI uses Wilder's smoothing (not simple average)."""
        closes = [Decimal(v) for v in (10, 11, 10, 11)]

        result = wilder_rsi(closes, period=2)

        # seed: avgGain 0.5, avgLoss 0.5 -> 50
        self.assertEqual(result[2], Decimal(50))
        # avgGain (0.5 + 1) / 2 = 0.75, avgLoss (0.5 + 0) / 2 = 0.25 -> RS 3
        self.assertEqual(result[3], Decimal(75))

    def test_rsi_bounds(self):
        """RSI stays within [0, 100]."""
        result = wilder_rsi(random_walk(200, seed=3), period=14)
        for value in result[14:]:
            self.assertGreaterEqual(value, 0)
            self.assertLessEqual(value, 100)


if __name__ == '__main__':
    unittest.main()
