from decimal import Decimal, InvalidOperation

import pytest

from src.utils.decimal_utils import coerce_decimal, quantize_money


def test_coerce_decimal_handles_common_inputs():
    assert coerce_decimal(None) == Decimal("0")
    assert coerce_decimal(12) == Decimal("12")
    assert coerce_decimal(" 12.50 ") == Decimal("12.50")
    assert coerce_decimal(0.1) == Decimal("0.1")
    value = Decimal("3.3")
    assert coerce_decimal(value) is value


def test_coerce_decimal_rejects_garbage():
    with pytest.raises(InvalidOperation):
        coerce_decimal("twelve")
    with pytest.raises(InvalidOperation):
        coerce_decimal(True)


def test_quantize_money_rounds_half_up():
    assert quantize_money(Decimal("2.345")) == Decimal("2.35")
    assert quantize_money(Decimal("2.344")) == Decimal("2.34")
    assert quantize_money(Decimal("7")) == Decimal("7.00")
