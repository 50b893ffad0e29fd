"""Test suite for AlloyMixer.

Tests cover:
1. No change when the target equals the current purity
2. Diluting with base metal (fine content preserved)
3. Enriching with higher-purity gold (fine-content balance)
4. Infeasible targets
5. Rejected inputs
"""
import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from goldcalc.config import COMMON_PURITIES
from goldcalc.data_structures import AdjustmentKind
from goldcalc.result import ErrorType
from goldcalc.services.alloy_mixer import AlloyMixer, karat_to_purity, purity_to_karat


class TestNoChange(unittest.TestCase):

    def setUp(self):
        self.mixer = AlloyMixer()

    def test_equal_purity(self):
        for weight in (0.5, 10, 123.456):
            for purity in (33.3, 75, 91.6, 99.9):
                adj = self.mixer.compute_adjustment(weight, purity, purity, 100).unwrap()
                self.assertEqual(adj.kind, AdjustmentKind.NO_CHANGE)
                self.assertEqual(adj.weight_to_add, 0)
                self.assertEqual(adj.resulting_total_weight, weight)

    def test_equal_purity_ignores_additive(self):
        adj = self.mixer.compute_adjustment(10, 91.6, 91.6, 50).unwrap()
        self.assertEqual(adj.kind, AdjustmentKind.NO_CHANGE)

    def test_round_off_difference(self):
        """Purities within floating round-off count as equal."""
        adj = self.mixer.compute_adjustment(10, 75, 75 + 1e-12).unwrap()
        self.assertEqual(adj.kind, AdjustmentKind.NO_CHANGE)
        self.assertEqual(adj.weight_to_add, 0)


class TestDiluting(unittest.TestCase):

    def setUp(self):
        self.mixer = AlloyMixer()

    def test_22k_to_18k(self):
        """10 g of 91.6% down to 75% needs about 2.2133 g of copper."""
        adj = self.mixer.compute_adjustment(10, 91.6, 75).unwrap()

        self.assertEqual(adj.kind, AdjustmentKind.ADD_DILUENT)
        self.assertAlmostEqual(adj.resulting_total_weight, 12.21333, places=4)
        self.assertAlmostEqual(adj.weight_to_add, 2.21333, places=4)

    def test_fine_content_preserved(self):
        for weight in (1, 7.5, 250):
            for current, target in ((99.9, 91.6), (91.6, 58.3), (75, 33.3), (58.3, 0.5)):
                adj = self.mixer.compute_adjustment(weight, current, target).unwrap()
                self.assertEqual(adj.kind, AdjustmentKind.ADD_DILUENT)
                self.assertGreater(adj.weight_to_add, 0)
                self.assertAlmostEqual(adj.resulting_total_weight * target / 100,
                                       weight * current / 100, places=9)

    def test_additive_purity_irrelevant(self):
        a = self.mixer.compute_adjustment(10, 91.6, 75, 100).unwrap()
        b = self.mixer.compute_adjustment(10, 91.6, 75, 10).unwrap()
        self.assertEqual(a, b)


class TestEnriching(unittest.TestCase):

    def setUp(self):
        self.mixer = AlloyMixer()

    def test_18k_to_22k_with_pure_gold(self):
        adj = self.mixer.compute_adjustment(10, 75, 91.6, 100).unwrap()

        self.assertEqual(adj.kind, AdjustmentKind.ADD_METAL)
        self.assertAlmostEqual(adj.weight_to_add, 10 * 16.6 / 8.4, places=9)
        self.assertAlmostEqual(adj.resulting_total_weight, 10 + 10 * 16.6 / 8.4, places=9)

    def test_mix_reaches_target(self):
        for weight, current, target, added in ((10, 75, 91.6, 100), (5, 58.3, 75, 99.5), (20, 0, 41.7, 91.6)):
            adj = self.mixer.compute_adjustment(weight, current, target, added).unwrap()
            fine = weight * current / 100 + adj.weight_to_add * added / 100
            self.assertAlmostEqual(fine / adj.resulting_total_weight * 100, target, places=9)

    def test_lower_purity_additive_needs_more(self):
        pure = self.mixer.compute_adjustment(10, 75, 91.6, 100).unwrap()
        impure = self.mixer.compute_adjustment(10, 75, 91.6, 99.5).unwrap()
        self.assertGreater(impure.weight_to_add, pure.weight_to_add)

    def test_blank_additive_defaults_to_pure(self):
        blank = self.mixer.compute_adjustment(10, 75, 91.6, "").unwrap()
        pure = self.mixer.compute_adjustment(10, 75, 91.6, 100).unwrap()
        self.assertEqual(blank, pure)


class TestInfeasible(unittest.TestCase):

    def setUp(self):
        self.mixer = AlloyMixer()

    def assertInfeasible(self, *args):
        result = self.mixer.compute_adjustment(*args)
        self.assertFalse(result.success)
        self.assertIsNone(result.value)
        self.assertEqual(result.error_type, ErrorType.INFEASIBLE_TARGET)

    def test_additive_equal_to_target(self):
        self.assertInfeasible(10, 75, 91.6, 91.6)

    def test_additive_below_target(self):
        self.assertInfeasible(10, 75, 91.6, 90)

    def test_pure_target_with_impure_additive(self):
        self.assertInfeasible(10, 91.6, 100, 99.9)

    def test_pure_target_with_pure_additive(self):
        self.assertInfeasible(10, 91.6, 100, 100)


class TestInvalidAlloyInputs(unittest.TestCase):

    def setUp(self):
        self.mixer = AlloyMixer()

    def assertFails(self, error_type, *args):
        result = self.mixer.compute_adjustment(*args)
        self.assertFalse(result.success)
        self.assertEqual(result.error_type, error_type)

    def test_zero_target(self):
        self.assertFails(ErrorType.INVALID_RANGE, 10, 91.6, 0)

    def test_non_positive_weight(self):
        self.assertFails(ErrorType.INVALID_RANGE, 0, 91.6, 75)
        self.assertFails(ErrorType.INVALID_RANGE, -1, 91.6, 75)

    def test_purity_bounds(self):
        self.assertFails(ErrorType.INVALID_RANGE, 10, 120, 75)
        self.assertFails(ErrorType.INVALID_RANGE, 10, 91.6, 101)
        self.assertFails(ErrorType.INVALID_RANGE, 10, 75, 91.6, 150)

    def test_missing_values(self):
        self.assertFails(ErrorType.INCOMPLETE_INPUT, "", 91.6, 75)
        self.assertFails(ErrorType.INCOMPLETE_INPUT, 10, None, 75)
        self.assertFails(ErrorType.INCOMPLETE_INPUT, 10, 91.6, "abc")
        self.assertFails(ErrorType.INCOMPLETE_INPUT, 10, float('nan'), 75)


class TestKarat(unittest.TestCase):

    def test_conversions(self):
        self.assertEqual(karat_to_purity(24), 100)
        self.assertEqual(karat_to_purity(18), 75)
        self.assertEqual(purity_to_karat(75), 18)
        self.assertAlmostEqual(karat_to_purity(22), 91.6667, places=4)

    def test_presets_are_valid_purities(self):
        for label, purity in COMMON_PURITIES.items():
            self.assertTrue(0 < purity < 100, label)
            self.assertAlmostEqual(purity_to_karat(purity), int(label[:-1]), delta=0.05)


if __name__ == '__main__':
    unittest.main()
