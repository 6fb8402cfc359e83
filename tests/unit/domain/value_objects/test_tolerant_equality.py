from __future__ import annotations

import pytest

from extended_float import ExtendedFloat, ExtendedFloat32, equal_option
from extended_float.domain.value_objects import tolerant_compare, tolerant_eq


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        (1e13, 1e13 + 1, True),
        (1e12, 1e12 + 1, False),
        (0.0000000000001, 0.0000000000002, True),
        (0.00000000001, 0.00000000002, False),
        (0.1 + 0.2, 0.3, True),
        (1.0, 1.0, True),
        (1.0, 1.1, False),
        (-5.0, 5.0, False),
    ],
)
def test_tolerant_equality_table(left: float, right: float, expected: bool) -> None:
    """
    Verify absolute-then-relative tolerance on hand-picked magnitudes.

    Args:
        left: First raw value.
        right: Second raw value.
        expected: Expected equality.
    Returns:
        None.
    Assumptions:
        Relative branch is strict, so `1e12` vs `1e12 + 1` sits just outside.
    Raises:
        AssertionError: If tolerance policy regresses.
    Side Effects:
        None.
    """
    assert (ExtendedFloat(left) == ExtendedFloat(right)) is expected
    assert (ExtendedFloat(right) == ExtendedFloat(left)) is expected
    assert (ExtendedFloat(left) != ExtendedFloat(right)) is not expected


def test_equality_is_not_transitive() -> None:
    """
    Verify tolerance chains can drift apart.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Each neighbour pair sits within the absolute epsilon.
    Raises:
        AssertionError: If equality accidentally became transitive.
    Side Effects:
        None.
    """
    a = ExtendedFloat(0.0)
    b = ExtendedFloat(0.9e-12)
    c = ExtendedFloat(1.8e-12)

    assert a == b
    assert b == c
    assert a != c


def test_raw_helpers_handle_nan() -> None:
    nan = float("nan")

    assert not tolerant_eq(nan, nan, 1e-12)
    assert not tolerant_eq(nan, 1.0, 1e-12)
    assert tolerant_compare(1.0, 1.0 + 1e-13, 1e-12) == 0
    assert tolerant_compare(2.0, 1.0, 1e-12) == 1
    assert tolerant_compare(1.0, 2.0, 1e-12) == -1


def test_float32_uses_its_own_epsilon() -> None:
    assert ExtendedFloat32(1.0) == ExtendedFloat32(1.000001)
    assert ExtendedFloat32(0.0) == ExtendedFloat32(5e-6)
    assert ExtendedFloat32(1.0) != ExtendedFloat32(1.001)


def test_ordering_is_consistent_with_equality() -> None:
    low = ExtendedFloat(1.0)
    near = ExtendedFloat(1.0 + 1e-13)
    high = ExtendedFloat(2.0)

    assert low < high
    assert high > low
    assert low <= near
    assert low >= near
    assert not low < near
    assert not near > low
    assert low.compare(near) == 0
    assert high.compare(low) == 1
    assert low.compare(high) == -1


def test_sorting_keeps_order_of_tolerant_equal_values() -> None:
    """
    Verify stable sort keeps insertion order inside a tolerant-equal run.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        `sorted` relies on `__lt__` only.
    Raises:
        AssertionError: If equal values get reordered.
    Side Effects:
        None.
    """
    first = ExtendedFloat(1.0 + 5e-13)
    second = ExtendedFloat(1.0)
    top = ExtendedFloat(2.0)
    bottom = ExtendedFloat(-3.0)

    ordered = sorted([top, first, second, bottom])

    assert [id(item) for item in ordered] == [id(bottom), id(first), id(second), id(top)]


def test_different_widths_never_compare() -> None:
    wide = ExtendedFloat(1.0)
    narrow = ExtendedFloat32(1.0)

    assert (wide == narrow) is False
    assert wide != narrow
    assert (wide == 1.0) is False
    with pytest.raises(TypeError):
        _ = wide < narrow  # type: ignore[operator]
    with pytest.raises(TypeError):
        wide.compare(narrow)  # type: ignore[arg-type]


def test_equal_option() -> None:
    value = ExtendedFloat(1.0)

    assert equal_option(None, None)
    assert not equal_option(None, value)
    assert not equal_option(value, None)
    assert equal_option(value, ExtendedFloat(1.0 + 1e-13))
    assert not equal_option(value, ExtendedFloat(2.0))


def test_absolute_tolerance_boundary_around_zero() -> None:
    epsilon = ExtendedFloat.policy.epsilon
    zero = ExtendedFloat(0.0)

    assert zero == ExtendedFloat(epsilon / 2)
    assert zero == ExtendedFloat(epsilon)
    assert zero != ExtendedFloat(epsilon * 10)


def test_equality_is_reflexive_and_symmetric_over_sample() -> None:
    """
    Verify reflexivity and symmetry across a deterministic magnitude sweep.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Neighbouring samples cover both tolerant-equal and distinct pairs.
    Raises:
        AssertionError: If either law breaks.
    Side Effects:
        None.
    """
    raws = [0.0, 1e-13, 1e-12, 2e-12, 0.5, 1.0, 1.0 + 1e-13, 1e12, 1e12 + 1, 1e13, 1e13 + 1]
    values = [ExtendedFloat(raw) for raw in raws + [-raw for raw in raws]]

    for left in values:
        assert left == left
        for right in values:
            assert (left == right) == (right == left)


def test_sorting_plain_integers() -> None:
    values = [ExtendedFloat(raw) for raw in (5.0, 2.0, 3.0, 1.0, 4.0)]

    assert [float(value) for value in sorted(values)] == [1.0, 2.0, 3.0, 4.0, 5.0]
