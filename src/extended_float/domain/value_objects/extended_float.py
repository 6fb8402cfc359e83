"""
Validated float value objects: NaN and infinity are rejected on every safe path.

Docs: docs/architecture/extended-float-v1.md
Related: extended_float.domain.policies, .tolerant_equality, .faithful_format,
  .float_text
"""

from __future__ import annotations

import math
from typing import Any, Callable, ClassVar, Self

import numpy as np

from extended_float.domain.errors import FromStringError, InvalidFloatError, InvalidKind
from extended_float.domain.policies import FLOAT32_POLICY, FLOAT64_POLICY, IeeeFloatPolicy

from .faithful_format import format_float
from .float_text import parse_raw_float
from .tolerant_equality import tolerant_compare, tolerant_eq

_Ufunc = Callable[[Any, Any], Any]


def classify_invalid(value: float) -> InvalidKind | None:
    """
    Return why a raw value is invalid, or `None` for finite values.

    Args:
        value: Raw float.
    Returns:
        InvalidKind | None: `NAN`, `INFINITE` or `None`.
    Assumptions:
        NaN check runs first so NaN is never reported as infinite.
    Raises:
        None.
    Side Effects:
        None.
    """
    if math.isnan(value):
        return InvalidKind.NAN
    if math.isinf(value):
        return InvalidKind.INFINITE
    return None


class BaseExtendedFloat:
    """
    BaseExtendedFloat — one finite float of a fixed width with tolerant semantics.

    Concrete widths bind `policy` at class level; values of different widths
    never compare or combine. Instances are small mutable holders: mutation goes
    through `update` (validated) or `update_unchecked`. Tolerant equality cannot
    agree with a hash, so instances are unhashable.

    Docs: docs/architecture/extended-float-v1.md
    Related: .tolerant_equality, .faithful_format, ..policies.ieee_float_policy
    """

    __slots__ = ("_value",)

    policy: ClassVar[IeeeFloatPolicy]

    _value: float

    def __init__(self, value: float = 0.0) -> None:
        """
        Validate and store value, failing on NaN or infinity.

        Args:
            value: Real number; rounded to the class width.
        Returns:
            None.
        Assumptions:
            Invalid input here is a programmer error; use `try_new` or
            `try_from_value` for ad-hoc validation.
        Raises:
            InvalidFloatError: If value is NaN or (after width rounding) infinite.
            TypeError: If value is text; use `from_str` for parsing.
        Side Effects:
            None.
        """
        self._value = self._validated(value)

    # ------------------------------------------------------------------
    # construction

    @classmethod
    def try_new(cls, value: float) -> Self | None:
        """
        Build value or return `None` when it is NaN or infinite.

        Args:
            value: Real number.
        Returns:
            Self | None: Validated instance or `None`.
        Assumptions:
            Failure kind is irrelevant to the caller.
        Raises:
            TypeError: If value is text.
        Side Effects:
            None.
        """
        result = cls.try_from_value(value)
        if isinstance(result, InvalidKind):
            return None
        return result

    @classmethod
    def try_from_value(cls, value: float) -> Self | InvalidKind:
        """
        Build value or return the discriminated reason it is invalid.

        Args:
            value: Real number.
        Returns:
            Self | InvalidKind: Validated instance, or `InvalidKind.NAN` /
            `InvalidKind.INFINITE`.
        Assumptions:
            Callers branch with `isinstance(result, InvalidKind)`.
        Raises:
            TypeError: If value is text.
        Side Effects:
            None.
        """
        raw = cls._coerce(value)
        kind = classify_invalid(raw)
        if kind is not None:
            return kind
        return cls._from_trusted(raw)

    @classmethod
    def new_unchecked(cls, value: float) -> Self:
        """
        Build value without NaN/infinity validation.

        Args:
            value: Real number the caller has already validated.
        Returns:
            Self: Instance holding the width-rounded value.
        Assumptions:
            Caller guarantees value is finite, e.g. after one bulk check upstream.
            Comparison, formatting and arithmetic on an invalid value produced
            here are unspecified; never pass unvalidated external input.
        Raises:
            TypeError: If value is text.
        Side Effects:
            None.
        """
        return cls._from_trusted(cls._coerce(value))

    @classmethod
    def from_str(cls, text: str) -> Self:
        """
        Parse a strict float literal into a validated value.

        Args:
            text: Literal such as `"1.5e3"`; surrounding whitespace is invalid.
        Returns:
            Self: Validated instance.
        Assumptions:
            Lexical failures and NaN/infinite results are one error kind. The
            literal is rounded to the class width once, not via binary64.
        Raises:
            FromStringError: If text is malformed or denotes NaN/infinity.
            TypeError: If text is not a `str`.
        Side Effects:
            None.
        """
        raw = parse_raw_float(text)
        if raw is None:
            raise FromStringError(text)
        result = cls.try_from_value(cls.policy.coerce_literal(text, raw))
        if isinstance(result, InvalidKind):
            raise FromStringError(text)
        return result

    @classmethod
    def _from_trusted(cls, raw: float) -> Self:
        instance = cls.__new__(cls)
        instance._value = raw
        return instance

    @classmethod
    def _coerce(cls, value: float) -> float:
        if isinstance(value, (str, bytes, bytearray)):
            raise TypeError(
                f"{cls.__name__} does not accept text, use {cls.__name__}.from_str"
            )
        return cls.policy.coerce(value)

    @classmethod
    def _validated(cls, value: float) -> float:
        raw = cls._coerce(value)
        kind = classify_invalid(raw)
        if kind is not None:
            raise InvalidFloatError(kind)
        return raw

    # ------------------------------------------------------------------
    # mutation and accessors

    def update(self, value: float) -> None:
        """
        Replace stored value using constructor validation.

        Args:
            value: Real number.
        Returns:
            None.
        Assumptions:
            On failure the previous value is kept.
        Raises:
            InvalidFloatError: If value is NaN or infinite.
            TypeError: If value is text.
        Side Effects:
            Mutates this instance.
        """
        self._value = self._validated(value)

    def update_unchecked(self, value: float) -> None:
        """Replace stored value without validation; same precondition as `new_unchecked`."""
        self._value = self._coerce(value)

    def downgrade(self) -> float:
        return self._value

    def is_nan(self) -> bool:
        return math.isnan(self._value)

    def is_infinite(self) -> bool:
        return math.isinf(self._value)

    def is_sign_positive(self) -> bool:
        return math.copysign(1.0, self._value) > 0

    def is_sign_negative(self) -> bool:
        return math.copysign(1.0, self._value) < 0

    def format(self) -> str:
        return format_float(self._value, self.policy)

    def __float__(self) -> float:
        return self._value

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return self.format()
        return format(self._value, format_spec)

    # ------------------------------------------------------------------
    # tolerant comparison

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return tolerant_eq(self._value, other._value, self.policy.epsilon)  # type: ignore[attr-defined]

    def compare(self, other: Self) -> int:
        """
        Three-way tolerant comparison.

        Args:
            other: Value of the same width class.
        Returns:
            int: `0` when tolerant-equal, `1` when greater, `-1` when less.
        Assumptions:
            Ordering is consistent with `==`, so sorting is stable for equal runs.
        Raises:
            TypeError: If `other` is not the same width class.
        Side Effects:
            None.
        """
        self._require_same_width(other)
        return tolerant_compare(self._value, other._value, self.policy.epsilon)

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.compare(other) < 0  # type: ignore[arg-type]

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.compare(other) <= 0  # type: ignore[arg-type]

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.compare(other) > 0  # type: ignore[arg-type]

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.compare(other) >= 0  # type: ignore[arg-type]

    def _require_same_width(self, other: object) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"expected {type(self).__name__}, got {type(other).__name__}"
            )

    # ------------------------------------------------------------------
    # arithmetic

    def _raw_op(self, other: Self, ufunc: _Ufunc) -> float:
        """
        Apply numpy ufunc in the class width with IEEE semantics.

        Args:
            other: Right operand of the same width class.
            ufunc: Binary numpy ufunc.
        Returns:
            float: Raw result, possibly NaN or infinite.
        Assumptions:
            Division by zero and overflow yield IEEE values instead of raising.
        Raises:
            None.
        Side Effects:
            None.
        """
        float_dtype = self.policy.float_dtype
        with np.errstate(all="ignore"):
            return float(ufunc(float_dtype(self._value), float_dtype(other._value)))

    def _binary(self, other: object, ufunc: _Ufunc) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self._raw_op(other, ufunc))  # type: ignore[arg-type]

    def _inplace(self, other: object, ufunc: _Ufunc) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        self.update(self._raw_op(other, ufunc))  # type: ignore[arg-type]
        return self

    def _checked(self, other: Self, ufunc: _Ufunc) -> Self | None:
        self._require_same_width(other)
        return self.try_new(self._raw_op(other, ufunc))

    def _try(self, other: Self, ufunc: _Ufunc) -> Self | InvalidKind:
        self._require_same_width(other)
        return self.try_from_value(self._raw_op(other, ufunc))

    def __add__(self, other: object) -> Self:
        return self._binary(other, np.add)

    def __sub__(self, other: object) -> Self:
        return self._binary(other, np.subtract)

    def __mul__(self, other: object) -> Self:
        return self._binary(other, np.multiply)

    def __truediv__(self, other: object) -> Self:
        return self._binary(other, np.true_divide)

    def __mod__(self, other: object) -> Self:
        return self._binary(other, np.fmod)

    def __iadd__(self, other: object) -> Self:
        return self._inplace(other, np.add)

    def __isub__(self, other: object) -> Self:
        return self._inplace(other, np.subtract)

    def __imul__(self, other: object) -> Self:
        return self._inplace(other, np.multiply)

    def __itruediv__(self, other: object) -> Self:
        return self._inplace(other, np.true_divide)

    def __imod__(self, other: object) -> Self:
        return self._inplace(other, np.fmod)

    def __neg__(self) -> Self:
        return type(self)(-self._value)

    def __abs__(self) -> Self:
        return type(self)(abs(self._value))

    def checked_add(self, other: Self) -> Self | None:
        return self._checked(other, np.add)

    def checked_sub(self, other: Self) -> Self | None:
        return self._checked(other, np.subtract)

    def checked_mul(self, other: Self) -> Self | None:
        return self._checked(other, np.multiply)

    def checked_div(self, other: Self) -> Self | None:
        """Divide, returning `None` for division by zero or overflow."""
        return self._checked(other, np.true_divide)

    def checked_rem(self, other: Self) -> Self | None:
        return self._checked(other, np.fmod)

    def try_add(self, other: Self) -> Self | InvalidKind:
        return self._try(other, np.add)

    def try_sub(self, other: Self) -> Self | InvalidKind:
        return self._try(other, np.subtract)

    def try_mul(self, other: Self) -> Self | InvalidKind:
        return self._try(other, np.multiply)

    def try_div(self, other: Self) -> Self | InvalidKind:
        """Divide, returning `InvalidKind.INFINITE` for `x / 0` and `NAN` for `0 / 0`."""
        return self._try(other, np.true_divide)

    def try_rem(self, other: Self) -> Self | InvalidKind:
        return self._try(other, np.fmod)


class ExtendedFloat(BaseExtendedFloat):
    """
    ExtendedFloat — validated binary64 value (`epsilon=1e-12`, 15 digits).

    Docs: docs/architecture/extended-float-v1.md
    Related: ..policies.float64_policy
    """

    __slots__ = ()

    policy = FLOAT64_POLICY


class ExtendedFloat32(BaseExtendedFloat):
    """
    ExtendedFloat32 — validated binary32 value (`epsilon~1e-5`, 6 digits).

    Docs: docs/architecture/extended-float-v1.md
    Related: ..policies.float32_policy
    """

    __slots__ = ()

    policy = FLOAT32_POLICY
