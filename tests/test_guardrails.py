from decimal import Decimal

import pytest

from quantseq import (
    ArgumentTypeError,
    AxisError,
    DomainError,
    EmptySequenceError,
    QuantileConfig,
    QuantileError,
    UsageError,
    quantile_seq,
    quantiles,
)

S = [3, -1, 5, 7]


def test_empty_sequence():
    with pytest.raises(EmptySequenceError, match="empty sequence"):
        quantile_seq([], 0.5)
    with pytest.raises(EmptySequenceError):
        quantile_seq([[], []], 2)


def test_negative_probability():
    with pytest.raises(DomainError, match="non-negative"):
        quantile_seq(S, -0.1)
    with pytest.raises(DomainError, match="non-negative"):
        quantile_seq(S, Decimal("-0.1"))


def test_nan_probability():
    with pytest.raises(DomainError):
        quantile_seq(S, float("nan"))
    with pytest.raises(DomainError):
        quantile_seq(S, [0.5, float("nan")])


def test_non_integer_count():
    with pytest.raises(DomainError, match="N must be a positive integer"):
        quantile_seq(S, 2.5)
    with pytest.raises(DomainError, match="N must be a positive integer"):
        quantile_seq(S, Decimal("2.5"))
    with pytest.raises(DomainError, match="N must be a positive integer"):
        quantile_seq(S, float("inf"))


def test_count_limit():
    with pytest.raises(DomainError, match="less than or equal"):
        quantile_seq(S, Decimal(2**32))
    with pytest.raises(DomainError, match="less than or equal"):
        quantile_seq(S, 10, cfg=QuantileConfig(max_count=5))


def test_probability_list_range():
    with pytest.raises(DomainError, match="between 0 and 1, inclusive"):
        quantile_seq(S, [1.5])
    with pytest.raises(DomainError, match="between 0 and 1, inclusive"):
        quantile_seq(S, [0.5, Decimal("-0.01")])


def test_probability_list_validated_before_computing():
    # The invalid entry wins over the empty data and over earlier valid entries
    with pytest.raises(DomainError):
        quantile_seq([], [0.5, 2])
    with pytest.raises(ArgumentTypeError):
        quantile_seq(S, [0.5, "0.7"])


def test_argument_count():
    with pytest.raises(UsageError):
        quantile_seq(S)
    with pytest.raises(UsageError):
        quantile_seq()
    with pytest.raises(UsageError):
        quantile_seq(S, 0.5, True, 0, 1)
    with pytest.raises(UsageError):
        quantile_seq(S, 0.5, True, is_sorted=True)


def test_argument_types():
    with pytest.raises(ArgumentTypeError):
        quantile_seq("3 -1 5 7", 0.5)
    with pytest.raises(ArgumentTypeError):
        quantile_seq({1, 2, 3}, 0.5)
    with pytest.raises(ArgumentTypeError):
        quantile_seq(S, "0.5")
    with pytest.raises(ArgumentTypeError):
        quantile_seq(S, 0.5, "yes")
    with pytest.raises(ArgumentTypeError):
        quantile_seq(S, 0.5, is_sorted=1)
    with pytest.raises(ArgumentTypeError):
        quantile_seq(S, True)


def test_selected_value_must_be_numeric():
    with pytest.raises(ArgumentTypeError):
        quantile_seq(["a", "b", "c"], 0.5)
    with pytest.raises(ArgumentTypeError):
        quantile_seq(["a", "b"], 0.5)
    with pytest.raises(ArgumentTypeError):
        quantile_seq([True, False], 0)


def test_axis_out_of_range():
    with pytest.raises(AxisError):
        quantile_seq([[1, 2], [3, 4]], 0.5, 2)
    with pytest.raises(IndexError):
        quantile_seq([1, 2, 3], 0.5, axis=-1)


def test_quantiles_helper_rejects_bad_counts():
    with pytest.raises(DomainError):
        quantiles(S, 0)
    with pytest.raises(DomainError):
        quantiles(S, 2.5)
    with pytest.raises(ArgumentTypeError):
        quantiles(S, "2")


def test_quantiles_helper_rejects_non_bool_sorted():
    with pytest.raises(ArgumentTypeError):
        quantiles(S, 2, "yes")
    with pytest.raises(ArgumentTypeError):
        quantiles(S, 2, 1)
    assert quantiles(S, 2, False) == [3, 5]


def test_errors_share_base_and_builtin_types():
    assert issubclass(DomainError, ValueError)
    assert issubclass(EmptySequenceError, ValueError)
    assert issubclass(ArgumentTypeError, TypeError)
    assert issubclass(UsageError, TypeError)
    assert issubclass(AxisError, IndexError)
    for cls in (DomainError, EmptySequenceError, ArgumentTypeError, UsageError, AxisError):
        assert issubclass(cls, QuantileError)
