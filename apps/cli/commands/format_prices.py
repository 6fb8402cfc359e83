from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Mapping, Sequence, TextIO

from extended_float.adapters.outbound.compute_numba import ExtendedFloatWarmupRunner
from extended_float.application.services import format_values, ingest_lines
from extended_float.domain.errors import FromStringError
from extended_float.domain.value_objects import BaseExtendedFloat, ExtendedFloat, ExtendedFloat32
from extended_float.platform.config import ALLOWED_WIDTHS, load_extended_float_runtime_config

log = logging.getLogger(__name__)

_VALUE_TYPES: dict[str, type[BaseExtendedFloat]] = {
    "f64": ExtendedFloat,
    "f32": ExtendedFloat32,
}


class FormatPricesCli:
    """
    Read one price literal per line and print its faithful decimal rendering.
    """

    def run(
        self,
        argv: Sequence[str],
        *,
        environ: Mapping[str, str] | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> int:
        parser = _build_parser()
        ns = parser.parse_args(list(argv))

        env = dict(os.environ if environ is None else environ)
        if ns.config:
            env["EXTENDED_FLOAT_CONFIG"] = ns.config

        try:
            cfg = load_extended_float_runtime_config(environ=env)
        except (FileNotFoundError, ValueError) as error:
            log.error("cannot load extended-float config: %s", error)
            return 2

        width = ns.width or cfg.width
        skip_invalid = cfg.skip_invalid if ns.skip_invalid is None else ns.skip_invalid
        value_type = _VALUE_TYPES[width]

        try:
            ExtendedFloatWarmupRunner(config=cfg).warmup()
        except ValueError as error:
            log.error("%s", error)
            return 2

        source = stdin if stdin is not None else sys.stdin
        try:
            if ns.path == "-":
                report = ingest_lines(source, value_type=value_type, skip_invalid=skip_invalid)
            else:
                with Path(ns.path).open(encoding="utf-8") as handle:
                    report = ingest_lines(
                        handle, value_type=value_type, skip_invalid=skip_invalid
                    )
        except FromStringError as error:
            log.error("%s", error)
            return 2
        except (OSError, UnicodeDecodeError) as error:
            log.error("cannot read %s: %s", ns.path, error)
            return 2

        values = sorted(report.values) if ns.sort else list(report.values)
        out = stdout if stdout is not None else sys.stdout
        for rendered in format_values(values):
            out.write(rendered + "\n")

        log.info(
            "format-prices done",
            extra={
                "width": width,
                "accepted": report.accepted_count,
                "rejected": report.rejected_count,
            },
        )
        return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="format-prices")
    p.add_argument("path", help="File with one float literal per line, or '-' for stdin")
    p.add_argument("--width", choices=ALLOWED_WIDTHS, default=None)
    p.add_argument("--skip-invalid", action=argparse.BooleanOptionalAction, default=None)
    p.add_argument("--sort", action="store_true", default=False)
    p.add_argument("--config", default=None, help="Path to extended_float.yaml")
    return p
