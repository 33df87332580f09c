from decimal import Decimal

from quantseq import QuantileConfig, quantile_seq, quantiles

D = [Decimal(3), Decimal(-1), Decimal(5), Decimal(7)]


def test_decimal_data_and_probability():
    q = quantile_seq(D, Decimal("0.5"))
    assert isinstance(q, Decimal)
    assert q == Decimal(4)


def test_native_data_wrapped_for_decimal_probability():
    q = quantile_seq([3, -1, 5, 7], Decimal("0.5"))
    assert isinstance(q, Decimal)
    assert q == Decimal("4.0")
    low = quantile_seq([3, -1, 5, 7], Decimal(0))
    assert isinstance(low, Decimal)
    assert low == Decimal(-1)


def test_decimal_count_lands_on_exact_ranks():
    result = quantile_seq([3, -1, 5, 7], Decimal(2))
    assert result == [Decimal(3), Decimal(5)]
    assert all(isinstance(v, Decimal) for v in result)
    assert quantiles(D, Decimal(2)) == [Decimal(3), Decimal(5)]


def test_decimal_interpolation_is_exact():
    # Binary floats would give 0.15000000000000002
    assert quantile_seq([Decimal("0.1"), Decimal("0.2")], 0.5) == Decimal("0.15")
    assert quantile_seq([Decimal("0.1"), Decimal("0.2")], Decimal("0.5")) == Decimal("0.15")


def test_decimal_probability_list_keeps_element_kind():
    assert quantile_seq([1, 2, 3, 4, 5], [Decimal("0.25"), Decimal("0.75")]) == [2, 4]


def test_mixed_native_and_decimal_elements():
    q = quantile_seq([Decimal("1.5"), 2.5, 0.5, Decimal("3.5")], 0.5)
    assert q == Decimal("2.0")


def test_decimal_places_quantize_results():
    cfg = QuantileConfig(decimal_places=2)
    q = quantile_seq([Decimal(1), Decimal(2)], Decimal("0.333"), cfg=cfg)
    assert q == Decimal("1.33")
    assert str(q) == "1.33"
