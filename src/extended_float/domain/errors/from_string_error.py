from __future__ import annotations


class FromStringError(ValueError):
    """
    Raised when text cannot be parsed into a validated float.

    Lexical failures and texts denoting NaN/infinity collapse into this single
    `invalid` kind.

    Docs: docs/architecture/extended-float-v1.md
    Related: ..value_objects.float_text, ...application.services.bulk_ingest
    """

    kind = "invalid"

    def __init__(self, text: str, *, line_number: int | None = None) -> None:
        self.text = text
        self.line_number = line_number
        location = f" at line {line_number}" if line_number is not None else ""
        super().__init__(f"invalid float literal{location}: {text!r}")
