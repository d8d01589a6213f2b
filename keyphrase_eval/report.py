from __future__ import annotations

import io
from typing import Sequence, TextIO

from .pipeline import ModelResult


_HEADER = ("Model", "Average Precision", "Best Precision", "Worst Precision")


def write_report(results: Sequence[ModelResult], out: TextIO) -> None:
    """Fixed-width precision table, one row per model."""

    out.write(f"{_HEADER[0]:>13}{_HEADER[1]:>21}{_HEADER[2]:>21}{_HEADER[3]:>21}\n")
    for r in results:
        p = r.precision
        out.write(f"{r.name:>13}{p.average:>21f}{p.best:>21f}{p.worst:>21f}\n")


def format_report(results: Sequence[ModelResult]) -> str:
    buf = io.StringIO()
    write_report(results, buf)
    return buf.getvalue()
