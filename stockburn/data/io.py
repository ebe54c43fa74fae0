"""
Tick file reading and writing.

Ticks are stored as CSV with a `t,v,vw,o,c,h,l,n` header. Written files use
ISO-8601 timestamps and the shortest decimal form of every float, so reading
a written file reproduces the same ticks exactly. The upstream Polygon
layout carries the same columns with a configurable timestamp format.

A numeric cell that cannot be parsed becomes NaN; the row is still emitted.
A row whose timestamp cannot be parsed cannot be placed on the clock, so it
is dropped and reported.
"""

import math
from pathlib import Path
from typing import IO, Iterable, Optional, Sequence, Union

import pandas as pd

from ..config.defaults import IOParams
from ..errors import MalformedDataError, MissingDataError
from ..logging import get_logger, log_row_issue
from .models import Tick

logger = get_logger(__name__)

TICK_COLUMNS = ["t", "v", "vw", "o", "c", "h", "l", "n"]
NUMERIC_COLUMNS = TICK_COLUMNS[1:]

POLYGON_DATETIME = IOParams().polygon_datetime

PathLike = Union[str, Path]


def _to_float(cell: str) -> float:
    """Parse one numeric cell, degrading to NaN."""
    try:
        return float(cell)
    except (TypeError, ValueError):
        return math.nan


def write_ticks(stream: Union[IO[str], PathLike], ticks: Iterable[Tick]) -> None:
    """
    Write ticks as CSV.

    Args:
        stream: Writable text stream or file path
        ticks: Ticks to write, in order
    """
    rows = [
        (tick.t.isoformat(), tick.v, tick.vw, tick.o, tick.c, tick.h, tick.l, tick.n)
        for tick in ticks
    ]
    frame = pd.DataFrame(rows, columns=TICK_COLUMNS)
    frame.to_csv(stream, index=False)


def read_ticks(stream: Union[IO[str], PathLike],
               datetime_format: Optional[str] = None) -> list[Tick]:
    """
    Read ticks from CSV.

    Args:
        stream: Readable text stream or file path
        datetime_format: strftime format of the `t` column; None for ISO-8601.
            Timestamps without an offset are taken as UTC.

    Returns:
        Ticks in file order

    Raises:
        MalformedDataError: If a required column is missing
    """
    long_rows: list[list[str]] = []

    def truncate_long_row(cells: list[str]) -> list[str]:
        long_rows.append(cells)
        return cells[:len(TICK_COLUMNS)]

    try:
        # The header is read as a data row so that a long first row is never
        # taken for an index column; the python engine allows a row callback.
        raw = pd.read_csv(
            stream,
            header=None,
            dtype=str,
            keep_default_na=False,
            engine="python",
            on_bad_lines=truncate_long_row,
        )
    except pd.errors.EmptyDataError:
        return []

    frame = raw.iloc[1:].set_axis(raw.iloc[0].tolist(), axis="columns").reset_index(drop=True)

    if long_rows:
        log_row_issue(logger, issue="extra_cells", action="truncated",
                      rows=len(long_rows), sample=",".join(long_rows[0]))

    missing = [column for column in TICK_COLUMNS if column not in frame.columns]
    if missing:
        raise MalformedDataError(
            f"Tick data is missing columns: {', '.join(missing)}",
            missing_columns=missing,
            expected_format=",".join(TICK_COLUMNS),
        )

    timestamps = pd.to_datetime(
        frame["t"],
        format=datetime_format or "ISO8601",
        utc=True,
        errors="coerce",
    )
    bad_rows = timestamps.isna()
    if bad_rows.any():
        log_row_issue(logger, issue="unparseable_timestamp", action="dropped",
                      rows=int(bad_rows.sum()), sample=frame.loc[bad_rows, "t"].iloc[0])

    numeric = {column: frame[column].map(_to_float).tolist() for column in NUMERIC_COLUMNS}

    ticks = []
    for i, (ts, bad) in enumerate(zip(timestamps, bad_rows)):
        if bad:
            continue
        ticks.append(Tick(
            t=ts.to_pydatetime(),
            v=numeric["v"][i],
            vw=numeric["vw"][i],
            o=numeric["o"][i],
            c=numeric["c"][i],
            h=numeric["h"][i],
            l=numeric["l"][i],
            n=numeric["n"][i],
        ))
    return ticks


def load_tick_files(paths: Sequence[PathLike],
                    datetime_format: Optional[str] = POLYGON_DATETIME) -> list[list[Tick]]:
    """
    Load one tick series per file, dropping files that yield no ticks.

    Args:
        paths: Tick files, one per stock
        datetime_format: Timestamp format shared by the files

    Returns:
        Non-empty tick series, in path order

    Raises:
        MissingDataError: If no paths are given
    """
    if not paths:
        raise MissingDataError("At least one tick file is required, received zero",
                               data_type="tick_files")

    series = []
    empty = []
    for path in paths:
        ticks = read_ticks(path, datetime_format)
        if ticks:
            series.append(ticks)
        else:
            empty.append(str(path))

    if empty:
        logger.warning("Detected empty tick files, which may have failed to read",
                       empty_count=len(empty), files=empty)

    logger.info("Loaded tick files", files=len(series),
                ticks=sum(len(ticks) for ticks in series))
    return series
