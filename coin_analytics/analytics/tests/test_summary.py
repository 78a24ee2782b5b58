"""
Unit tests for the indicator set and the latest-value summary.
"""
import unittest
from decimal import Decimal
from ..indicators.indicator_set import INDICATOR_COLUMNS, calculate_indicator_set
from ..indicators.summary import (
    classify_macd,
    classify_rsi,
    score_overall_trend,
    summarize_indicators,
)
from ..preprocessing import clean_price_series
from ..types import PriceRow
from .helpers import random_walk


class TestIndicatorSet(unittest.TestCase):

    def test_columns_aligned(self):
        closes = random_walk(60)
        result = calculate_indicator_set(closes)

        self.assertEqual(tuple(result.keys()), INDICATOR_COLUMNS)
        for name, values in result.items():
            self.assertEqual(len(values), 60, name)

    def test_lookbacks(self):
        result = calculate_indicator_set(random_walk(60))

        self.assertIsNone(result["sma20"][18])
        self.assertIsNotNone(result["sma20"][19])
        self.assertIsNone(result["sma50"][48])
        self.assertIsNotNone(result["sma50"][49])
        self.assertIsNotNone(result["ema12"][11])
        self.assertIsNotNone(result["ema26"][25])
        self.assertIsNotNone(result["rsi14"][14])
        self.assertIsNotNone(result["signal"][33])
        self.assertIsNotNone(result["bbUpper"][19])
        self.assertIsNone(result["dailyReturn"][0])
        self.assertIsNotNone(result["dailyReturn"][1])

    def test_constant_series(self):
        """A flat series sits on its averages with zero MACD and returns."""
        result = calculate_indicator_set([Decimal("100")] * 40)
        tolerance = Decimal("1e-20")

        self.assertEqual(result["sma20"][-1], Decimal(100))
        self.assertLess(abs(result["ema26"][-1] - Decimal(100)), tolerance)
        self.assertEqual(result["bbUpper"][-1], Decimal(100))
        self.assertEqual(result["bbLower"][-1], Decimal(100))
        self.assertTrue(all(v == 0 for v in result["dailyReturn"][1:]))
        self.assertLess(abs(result["macdHist"][-1]), tolerance)

    def test_columns_are_independent(self):
        """A short series still gets the columns it can support."""
        result = calculate_indicator_set(random_walk(16))
        self.assertTrue(all(v is None for v in result["sma20"]))
        self.assertTrue(all(v is None for v in result["macd"]))
        self.assertIsNotNone(result["ema12"][-1])
        self.assertIsNotNone(result["rsi14"][-1])


class TestSummary(unittest.TestCase):

    def test_empty_series(self):
        self.assertEqual(summarize_indicators([]), {})

    def test_rising_series(self):
        closes = [Decimal(100 + i) for i in range(60)]
        summary = summarize_indicators(closes)

        self.assertEqual(summary["price"], Decimal(159))
        self.assertEqual(summary["rsi"], Decimal(100))
        self.assertEqual(summary["rsiSignal"], "overbought")
        self.assertIsNone(summary["sma200"])
        self.assertIn(summary["overallTrend"], {
            "strongly_bullish", "bullish", "neutral", "bearish", "strongly_bearish"
        })

    def test_ohlc_readings(self):
        """ATR and Stochastic come from highs/lows when the series has them."""
        closes = random_walk(40, seed=6)
        series = clean_price_series([
            PriceRow(timestamp=i, high=c + 2, low=c - 2, close=c) for i, c in enumerate(closes, start=1)
        ])

        summary = summarize_indicators(series)

        self.assertGreater(summary["atr"], 0)
        self.assertGreaterEqual(summary["stochK"], 0)
        self.assertLessEqual(summary["stochK"], 100)
        self.assertIsNotNone(summary["stochD"])

    def test_close_only_has_no_ohlc_readings(self):
        series = clean_price_series([(i, c) for i, c in enumerate(random_walk(40), start=1)])
        summary = summarize_indicators(series)
        self.assertIsNone(summary["atr"])
        self.assertIsNone(summary["stochK"])
        self.assertIsNone(summary["stochD"])

    def test_classifiers(self):
        self.assertEqual(classify_rsi(Decimal(75)), "overbought")
        self.assertEqual(classify_rsi(Decimal(25)), "oversold")
        self.assertEqual(classify_rsi(None), "neutral")
        self.assertEqual(classify_macd(Decimal("0.5")), "bullish")
        self.assertEqual(classify_macd(Decimal("-0.5")), "bearish")
        self.assertEqual(classify_macd(None), "neutral")

    def test_overall_trend(self):
        price = Decimal(100)
        self.assertEqual(
            score_overall_trend(price, Decimal(25), "bullish", Decimal(90), Decimal(80)),
            "strongly_bullish"
        )
        self.assertEqual(
            score_overall_trend(price, Decimal(75), "bearish", Decimal(110), Decimal(120)),
            "strongly_bearish"
        )
        self.assertEqual(score_overall_trend(price, None, "neutral", None, None), "neutral")
        self.assertEqual(
            score_overall_trend(price, Decimal(50), "bullish", Decimal(90), None),
            "bullish"
        )


if __name__ == '__main__':
    unittest.main()
