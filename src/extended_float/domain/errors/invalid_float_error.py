from __future__ import annotations

from enum import Enum


class InvalidKind(str, Enum):
    """
    InvalidKind — reason a raw float cannot become a validated value.

    Docs: docs/architecture/extended-float-v1.md
    Related: ..value_objects.extended_float
    """

    NAN = "nan"
    INFINITE = "infinite"


_MESSAGES = {
    InvalidKind.NAN: "ExtendedFloat doesn't support NaN values",
    InvalidKind.INFINITE: "ExtendedFloat doesn't support infinite values",
}


class InvalidFloatError(ValueError):
    """
    Raised when a NaN or infinite value reaches a validating construction path.

    Docs: docs/architecture/extended-float-v1.md
    Related: ..value_objects.extended_float, .invalid_float_error.InvalidKind
    """

    def __init__(self, kind: InvalidKind) -> None:
        """
        Store invalid kind and build a stable message.

        Args:
            kind: Which invalid value was rejected.
        Returns:
            None.
        Assumptions:
            Message text is stable and asserted by tests.
        Raises:
            None.
        Side Effects:
            None.
        """
        self.kind = kind
        super().__init__(_MESSAGES[kind])
