import logging
import math
from dataclasses import dataclass
from decimal import Decimal

import pytest

from comparators import OrderingConfig, UnsupportedComparisonError, natural_order
from comparators.core import natural


@dataclass
class CustomItem:
    id: int
    name: str

    def compare_to(self, other: "CustomItem") -> int:
        return self.id - other.id


def sort_with(values, comparator):
    return sorted(values, key=comparator.as_key())


def test_numbers_sort_ascending():
    data = [5, 9, 2, 7, 1, 10, 8, 4, 3, 6]
    assert sort_with(data, natural_order()) == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


def test_numeric_strings_sort_lexicographically():
    data = ["5", "9", "2", "7", "1", "10", "8", "4", "3", "6"]
    assert sort_with(data, natural_order()) == ["1", "10", "2", "3", "4", "5", "6", "7", "8", "9"]


def test_true_orders_before_false():
    assert sort_with([True, False, True, False], natural_order()) == [True, True, False, False]


def test_number_comparison_returns_raw_difference():
    comparator = natural_order()
    assert comparator(10, 3) == 7
    assert comparator(3, 10) == -7
    assert comparator(2.5, 2.5) == 0
    assert comparator(10**30, 1) == 10**30 - 1


def test_mixed_int_and_float_compare_as_numbers():
    assert natural_order()(1, 1.5) == -0.5


def test_clamped_numbers_return_sign_only():
    comparator = natural_order(OrderingConfig(clamp_numbers=True))
    assert comparator(10, 3) == 1
    assert comparator(3, 10) == -1
    assert comparator(4, 4) == 0


def test_numeric_extremes():
    comparator = natural_order()
    inf = float("inf")
    assert comparator(inf, inf) == 0
    assert comparator(-inf, -inf) == 0
    assert comparator(inf, 1) > 0
    assert comparator(-inf, 1) < 0
    assert comparator(1e308, -1e308) > 0
    assert math.isinf(comparator(1e308, -1e308))
    assert comparator(float("nan"), 1) == 0


def test_comparable_objects_delegate_to_compare_to():
    data = [CustomItem(5, "E"), CustomItem(1, "A"), CustomItem(3, "C")]
    assert sort_with(data, natural_order()) == [CustomItem(1, "A"), CustomItem(3, "C"), CustomItem(5, "E")]


def test_plain_objects_raise_unsupported_comparison():
    comparator = natural_order()
    with pytest.raises(UnsupportedComparisonError):
        comparator({"a": 1}, {"b": 2})


def test_mismatched_types_raise_type_error():
    comparator = natural_order()
    with pytest.raises(TypeError):
        comparator("string", 5)
    # bool is not treated as a number
    with pytest.raises(TypeError):
        comparator(True, 1)


def test_error_reports_operand_types():
    with pytest.raises(UnsupportedComparisonError) as excinfo:
        natural_order()(object(), 3)
    assert excinfo.value.left_type is object
    assert excinfo.value.right_type is int
    assert "object" in str(excinfo.value)


def test_unsupported_comparison_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="comparators.core.natural")
    with pytest.raises(UnsupportedComparisonError):
        natural_order()([1], [2])
    assert "No natural ordering between list and list" in caplog.text


def test_reflexivity():
    comparator = natural_order()
    for value in (0, -3.5, "abc", True, False, None, CustomItem(2, "B")):
        assert comparator(value, value) == 0


def test_locale_collation_delegates_to_strcoll(monkeypatch):
    calls = []

    def fake_strcoll(a, b):
        calls.append((a, b))
        return -42

    monkeypatch.setattr(natural.locale, "strcoll", fake_strcoll)
    assert natural_order()("x", "y") == -42
    assert calls == [("x", "y")]


def test_codepoint_collation_orders_by_code_point():
    comparator = natural_order(OrderingConfig(collation="codepoint"))
    assert comparator("B", "a") < 0
    assert comparator("b", "a") == 1
    assert comparator("a", "a") == 0


def test_empty_and_single_element_sequences():
    assert sort_with([], natural_order()) == []
    assert sort_with([7, 7, 7, 7], natural_order()) == [7, 7, 7, 7]


def test_huge_int_against_float_returns_exact_sign():
    comparator = natural_order()
    assert comparator(10**400, 1.5) > 0
    assert comparator(1.5, 10**400) < 0
    assert comparator(-(10**400), float("inf")) < 0
    assert natural_order(OrderingConfig(clamp_numbers=True))(10**400, 1.5) == 1
    assert sort_with([1.5, 10**400, 2], comparator) == [1.5, 2, 10**400]


def test_decimals_compare_as_numbers():
    comparator = natural_order()
    assert comparator(Decimal("1.5"), Decimal("2")) == Decimal("-0.5")
    assert comparator(Decimal("2"), 1) == 1
    assert comparator(Decimal("1"), 1.5) < 0
    assert comparator(Decimal("NaN"), Decimal("1")) == 0
    assert sort_with([Decimal("3.1"), 2, Decimal("0.5")], comparator) == [Decimal("0.5"), 2, Decimal("3.1")]
