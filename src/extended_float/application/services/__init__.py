from .bulk_format import format_values
from .bulk_ingest import IngestReport, ingest_lines

__all__ = [
    "IngestReport",
    "format_values",
    "ingest_lines",
]
