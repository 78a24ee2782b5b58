"""
Unit tests for the OHLC indicators (ATR and Stochastic).
"""
import unittest
from decimal import Decimal
from ..indicators.atr import calculate_atr, calculate_true_range
from ..indicators.stochastic import calculate_stochastic
from ..preprocessing import clean_price_series
from ..types import PriceRow


def _ohlc_series():
    return clean_price_series([
        PriceRow(timestamp=1, open="9", high="12", low="8", close="10"),
        PriceRow(timestamp=2, open="10", high="13", low="9", close="12"),
        PriceRow(timestamp=3, open="12", high="14", low="11", close="11"),
    ])


class TestATR(unittest.TestCase):

    def test_true_range(self):
        result = calculate_true_range(_ohlc_series())
        self.assertEqual(result, [Decimal(4), Decimal(4), Decimal(3)])

    def test_atr(self):
        result = calculate_atr(_ohlc_series(), period=2)
        self.assertEqual(result, [None, Decimal(4), Decimal("3.5")])

    def test_atr_without_ohlc(self):
        """Close-only input yields an all-None column."""
        series = clean_price_series([(1, 10), (2, 11), (3, 12)])
        self.assertEqual(calculate_atr(series, period=2), [None, None, None])


class TestStochastic(unittest.TestCase):

    def test_stochastic(self):
        result = calculate_stochastic(_ohlc_series(), k_period=2, d_period=2)

        self.assertEqual(result["k"], [None, Decimal(80), Decimal(40)])
        self.assertEqual(result["d"], [None, None, Decimal(60)])

    def test_flat_window(self):
        """highest == lowest gives %K 50."""
        series = clean_price_series([
            PriceRow(timestamp=i, high="5", low="5", close="5") for i in range(1, 4)
        ])
        result = calculate_stochastic(series, k_period=2, d_period=2)
        self.assertEqual(result["k"][2], Decimal(50))

    def test_stochastic_without_ohlc(self):
        series = clean_price_series([(1, 10), (2, 11)])
        result = calculate_stochastic(series)
        self.assertEqual(result["k"], [None, None])
        self.assertEqual(result["d"], [None, None])


if __name__ == '__main__':
    unittest.main()
