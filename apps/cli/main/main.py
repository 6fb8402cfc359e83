from __future__ import annotations

import logging
import sys

from apps.cli.commands.format_prices import FormatPricesCli


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    _configure_logging()
    args = argv if argv is not None else sys.argv[1:]

    if not args:
        print(
            "Usage:\n"
            "  format-prices PATH [--width f64|f32] [--[no-]skip-invalid] [--sort]\n"
            "                [--config PATH]\n"
        )
        return 2

    cmd = args[0]
    rest = args[1:]

    if cmd == "format-prices":
        return FormatPricesCli().run(rest)

    print(f"Unknown command: {cmd}", file=sys.stderr)
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
