"""
Bulk ingestion of float literals: parse, validate once as an array, wrap unchecked.

Docs: docs/architecture/extended-float-v1.md
Related: extended_float.domain.value_objects.float_text,
  extended_float.adapters.outbound.compute_numba.kernels,
  apps.cli.commands.format_prices
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from extended_float.adapters.outbound.compute_numba import invalid_mask
from extended_float.domain.errors import FromStringError
from extended_float.domain.value_objects import BaseExtendedFloat, ExtendedFloat, parse_raw_float

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class IngestReport:
    """
    IngestReport — validated values plus 1-based numbers of rejected lines.

    Docs: docs/architecture/extended-float-v1.md
    Related: .bulk_format
    """

    values: tuple[BaseExtendedFloat, ...]
    rejected_line_numbers: tuple[int, ...]

    @property
    def accepted_count(self) -> int:
        return len(self.values)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected_line_numbers)


def ingest_lines(
    lines: Iterable[str],
    *,
    value_type: type[BaseExtendedFloat] = ExtendedFloat,
    skip_invalid: bool = False,
) -> IngestReport:
    """
    Parse one float literal per line into validated values of `value_type`.

    Args:
        lines: Text lines; trailing `\\r`/`\\n` are removed, nothing else is stripped.
        value_type: Concrete width class (`ExtendedFloat` or `ExtendedFloat32`).
        skip_invalid: Log and skip invalid lines instead of failing.
    Returns:
        IngestReport: Accepted values in input order and rejected line numbers.
    Assumptions:
        Non-finite detection runs once over the whole batch, so values are built
        with `new_unchecked`.
    Raises:
        FromStringError: In strict mode, for the first invalid line.
    Side Effects:
        Emits one warning per skipped line and one summary log record.
    """
    policy = value_type.policy
    raws: list[float] = []
    raw_line_numbers: list[int] = []
    raw_texts: list[str] = []
    rejected: list[tuple[int, str]] = []

    for line_number, line in enumerate(lines, start=1):
        text = line.rstrip("\r\n")
        raw = parse_raw_float(text)
        if raw is None:
            rejected.append((line_number, text))
            continue
        raws.append(policy.coerce_literal(text, raw))
        raw_line_numbers.append(line_number)
        raw_texts.append(text)

    batch = policy.coerce_array(raws)
    mask = invalid_mask(batch)
    for index in mask.nonzero()[0].tolist():
        rejected.append((raw_line_numbers[index], raw_texts[index]))
    rejected.sort()

    if rejected and not skip_invalid:
        line_number, text = rejected[0]
        raise FromStringError(text, line_number=line_number)

    for line_number, text in rejected:
        log.warning("skipping invalid float literal at line %d: %r", line_number, text)

    values = tuple(
        value_type.new_unchecked(raw)
        for raw, is_bad in zip(batch.tolist(), mask.tolist())
        if not is_bad
    )
    log.info(
        "extended_float ingest complete",
        extra={
            "width": policy.name,
            "accepted": len(values),
            "rejected": len(rejected),
        },
    )
    return IngestReport(
        values=values,
        rejected_line_numbers=tuple(line_number for line_number, _ in rejected),
    )
