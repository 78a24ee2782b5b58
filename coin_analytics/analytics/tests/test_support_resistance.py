"""
Unit tests for support/resistance detection.
"""
import unittest
from decimal import Decimal
from ..indicators.support_resistance import find_support_resistance
from ..preprocessing import clean_price_series
from ..types import PriceRow

# One cycle: swing high at 110, swing low at 90
CYCLE = (100, 105, 110, 105, 100, 95, 90, 95)


def _oscillating_series(cycles: int = 4):
    closes = [Decimal(v) for v in CYCLE * cycles]
    return clean_price_series([(i, c) for i, c in enumerate(closes)])


class TestSupportResistance(unittest.TestCase):

    def test_levels_from_swings(self):
        series = _oscillating_series()

        levels = find_support_resistance(series)

        self.assertEqual(len(levels), 2)
        support, resistance = levels  # nearest to the last close (95) first

        self.assertEqual(support.level_type, "support")
        self.assertEqual(support.price, Decimal(90))
        self.assertEqual(support.touches, 3)  # the fourth low is too close to the end
        self.assertEqual(support.strength, "moderate")
        self.assertEqual(support.last_tested, 22)

        self.assertEqual(resistance.level_type, "resistance")
        self.assertEqual(resistance.price, Decimal(110))
        self.assertEqual(resistance.touches, 4)
        self.assertEqual(resistance.strength, "strong")
        self.assertEqual(resistance.last_tested, 26)

    def test_nearby_swings_cluster(self):
        """Swing highs within 2% share one level at their average price."""
        closes = []
        for peak in (110, 111, 110, 111):
            closes.extend([100, 105, peak, 105, 100, 95, 90, 95])
        series = clean_price_series([(i, Decimal(c)) for i, c in enumerate(closes)])

        resistance = [lvl for lvl in find_support_resistance(series) if lvl.level_type == "resistance"]

        self.assertEqual(len(resistance), 1)
        self.assertEqual(resistance[0].touches, 4)
        self.assertAlmostEqual(float(resistance[0].price), 110.5, places=9)

    def test_uses_highs_and_lows(self):
        rows = [
            PriceRow(timestamp=i, high=Decimal(v) + 5, low=Decimal(v) - 5, close=Decimal(v))
            for i, v in enumerate(CYCLE * 4)
        ]
        levels = find_support_resistance(clean_price_series(rows))

        prices = sorted(level.price for level in levels)
        self.assertEqual(prices, [Decimal(85), Decimal(115)])

    def test_short_series(self):
        series = clean_price_series([(i, Decimal(100 + i)) for i in range(19)])
        self.assertEqual(find_support_resistance(series), [])

    def test_to_dict(self):
        level = find_support_resistance(_oscillating_series())[0]
        self.assertEqual(set(level.to_dict()), {"price", "type", "strength", "touches", "lastTested"})


if __name__ == '__main__':
    unittest.main()
