"""
Unit tests for the screener's heuristic momentum score.
"""
import unittest
from decimal import Decimal
from ..indicators.momentum import heuristic_momentum_score, label_momentum_score


class TestMomentumScore(unittest.TestCase):

    def test_formula(self):
        """score = 50 + (c24 + 0.5 * c7) * 2"""
        self.assertEqual(heuristic_momentum_score("2.3"), Decimal("54.6"))
        self.assertEqual(heuristic_momentum_score(1, 4), Decimal(56))

    def test_clamped(self):
        self.assertEqual(heuristic_momentum_score(100), Decimal(90))
        self.assertEqual(heuristic_momentum_score(-100, -50), Decimal(10))

    def test_missing_and_non_finite(self):
        self.assertEqual(heuristic_momentum_score(None), Decimal(50))
        self.assertEqual(heuristic_momentum_score(float("nan")), Decimal(50))

    def test_unparsable_input(self):
        self.assertEqual(heuristic_momentum_score("abc"), Decimal(50))
        self.assertEqual(heuristic_momentum_score("1", "n/a"), Decimal(50))

    def test_labels(self):
        self.assertEqual(label_momentum_score(Decimal(75))["momentumLabel"], "strong")
        self.assertEqual(label_momentum_score(Decimal(20))["momentumLabel"], "weak")
        self.assertEqual(label_momentum_score(Decimal(50))["momentumLabel"], "moderate")


if __name__ == '__main__':
    unittest.main()
