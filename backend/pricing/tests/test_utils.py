from decimal import Decimal

import pytest

from ..services.utils import d, format_currency, q2


class TestFormatCurrency:
    @pytest.mark.parametrize("amount,expected", [
        (1234.5, "Rs. 1,234.50"),
        (Decimal("0"), "Rs. 0.00"),
        (Decimal("1000000"), "Rs. 1,000,000.00"),
        ("99.999", "Rs. 100.00"),
        (Decimal("0.005"), "Rs. 0.01"),
        (Decimal("-1500.25"), "Rs. -1,500.25"),
    ])
    def test_rs_prefix_grouped_two_places(self, amount, expected):
        assert format_currency(amount) == expected

    def test_custom_prefix(self):
        assert format_currency(Decimal("12"), prefix="$") == "$12.00"


class TestCoercion:
    def test_float_goes_through_str(self):
        assert d(0.1) == Decimal("0.1")

    def test_blank_values_are_zero(self):
        assert d(None) == Decimal("0")
        assert d("") == Decimal("0")

    def test_q2_rounds_half_up(self):
        assert q2(Decimal("2.345")) == Decimal("2.35")
