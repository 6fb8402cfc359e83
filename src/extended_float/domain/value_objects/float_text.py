"""
Strict text boundary for validated floats.

Accepts plain decimal literals (`1`, `-1.5`, `.5`, `5.`, `1.5e3`) and the
`inf`/`infinity`/`nan` words; everything else, including surrounding
whitespace, digit separators and hex literals, is rejected.

Docs: docs/architecture/extended-float-v1.md
Related: extended_float.domain.value_objects.extended_float,
  extended_float.application.services.bulk_ingest
"""

from __future__ import annotations

import re

_FLOAT_LITERAL = re.compile(
    # sign[opt]
    r"[+-]?(?:"
    # (digits.digits[opt] or .digits) exponent[opt]
    r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?"
    # inf, infinity or nan
    r"|inf(?:inity)?|nan)",
    re.ASCII | re.IGNORECASE,
)


def parse_raw_float(text: str) -> float | None:
    """
    Parse one literal into a raw Python float.

    Args:
        text: Candidate literal, taken verbatim.
    Returns:
        float | None: Parsed value (possibly NaN or infinite), or `None` when the
        text is not a float literal.
    Assumptions:
        Grammar is checked before delegating to the C-level `float` parser.
    Raises:
        TypeError: If `text` is not a `str`.
    Side Effects:
        None.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    if _FLOAT_LITERAL.fullmatch(text) is None:
        return None
    return float(text)
