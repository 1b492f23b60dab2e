"""
Tests for billed-amount normalization
"""

import pytest

from tripstats.services.billing import normalize_billed_amount, sum_billed
from conftest import make_trip


class TestNormalizeBilledAmount:
    """normalize_billed_amount coercion rules"""

    def test_numbers_pass_through(self):
        assert normalize_billed_amount(1234.5) == 1234.5
        assert normalize_billed_amount(42) == 42

    def test_comma_formatted_string(self):
        assert normalize_billed_amount("1,234.50") == 1234.5
        assert normalize_billed_amount("1,000,000") == 1000000.0
        assert normalize_billed_amount("19.99") == 19.99

    @pytest.mark.parametrize("value", ["bad", "", "12abc", "nan", "inf", "1_000", "0x1A", "1e999"])
    def test_unparseable_string_is_zero(self, value):
        assert normalize_billed_amount(value) == 0

    @pytest.mark.parametrize("value", [None, {"amount": 5}, [5], True, False])
    def test_other_types_are_zero(self, value):
        assert normalize_billed_amount(value) == 0


class TestSumBilled:
    """sum_billed over trips"""

    def test_mixed_encodings(self):
        trips = [
            make_trip("D1", 10.25),
            make_trip("D1", "1,000.50"),
            make_trip("D2", None),
            make_trip("D2", "n/a"),
        ]
        assert sum_billed(trips) == pytest.approx(1010.75)

    def test_empty(self):
        assert sum_billed([]) == 0

    def test_signed_and_padded_strings(self):
        assert normalize_billed_amount(" -1,250.75 ") == -1250.75
        assert normalize_billed_amount(".5") == 0.5
