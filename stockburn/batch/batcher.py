"""
Multi-stream batching of tick data.

Merges K independently timestamped tick streams, an auxiliary feature stream
and caller-supplied time features into fixed-shape (batch, sequence,
features) arrays. A shared virtual clock walks forward over the union of the
streams' timestamps; a stream with no tick at the current clock time
contributes zeros for that row and is not advanced.

Cursors are mutated in place. Do not build batches concurrently from the
same cursors.
"""

from datetime import datetime
from typing import Callable, Iterable, Optional, Sequence

import numpy as np

from ..data.models import Prediction, Tick
from ..errors import BatchContractError, StreamCountError
from ..logging import get_logger
from ..utils.iterators import PeekableIterator

logger = get_logger(__name__)

BATCH_DTYPE = np.float32

TimeFn = Callable[[datetime, list], None]

_ZERO_TICK = [0.0] * Tick.NN_FIELDS
_ZERO_PRED = [0.0] * Prediction.NN_FIELDS


def next_time(tick_iterators: Sequence[PeekableIterator]) -> Optional[datetime]:
    """Get the earliest upcoming timestamp across streams, None if all are exhausted."""
    timestamps = [tick.t for tick in (ticks.peek() for ticks in tick_iterators) if tick is not None]
    return min(timestamps) if timestamps else None


def _push_additional(row: list, additional: Optional[Sequence[float]], width: int) -> None:
    """Append auxiliary features truncated or zero-padded to `width`."""
    if additional is None:
        row.extend([0.0] * width)
        return
    values = [float(value) for value in additional[:width]]
    row.extend(values)
    row.extend([0.0] * (width - len(values)))


def make_batches(
    additional_inputs: int,
    stocks: int,
    date_inputs: int,
    additional: Iterable[Sequence[float]],
    time_func: TimeFn,
    tick_iterators: Sequence[PeekableIterator],
    batch_size: int,
    sequence_length: int,
) -> Optional[tuple[np.ndarray, np.ndarray]]:
    """
    Package a batch of sequences of ticks and additional data into arrays.

    Each row holds, in order: the auxiliary features, the time features for
    the current clock time, then Tick.NN_FIELDS values per stream (zeros when
    the stream has no tick at that time). The matching output row holds the
    prediction fields of each stream's tick at the clock time after the
    advance, zeros when there is none.

    Args:
        additional_inputs: Width of the auxiliary features
        stocks: Number of tick streams
        date_inputs: Number of values time_func appends per row
        additional: Auxiliary feature rows; zeros once it runs out
        time_func: Appends date_inputs time features for a clock time to a row
        tick_iterators: One peekable cursor per stream, timestamps non-decreasing
        batch_size: Sequences per batch
        sequence_length: Rows per sequence

    Returns:
        Tuple of (inputs, outputs) float32 arrays shaped
        (batch_size, sequence_length, features), or None if every stream is
        exhausted before the first row

    Raises:
        StreamCountError: If len(tick_iterators) != stocks
        BatchContractError: If time_func writes the wrong number of features
    """
    if len(tick_iterators) != stocks:
        raise StreamCountError(
            f"Wrong number of input stocks: expected {stocks}, got {len(tick_iterators)}",
            expected=stocks,
            actual=len(tick_iterators),
        )

    rows = batch_size * sequence_length
    input_features = additional_inputs + date_inputs + stocks * Tick.NN_FIELDS
    output_features = stocks * Prediction.NN_FIELDS

    curr_t = next_time(tick_iterators)
    if curr_t is None:
        return None

    inputs: list = []
    outputs: list = []
    additional = iter(additional)
    exhausted_row = None

    for row in range(rows):
        _push_additional(inputs, next(additional, None), additional_inputs)

        written = len(inputs)
        time_func(curr_t, inputs)
        written = len(inputs) - written
        if written != date_inputs:
            raise BatchContractError(
                f"Time function wrote {written} features, expected {date_inputs}",
                expected=date_inputs,
                actual=written,
            )

        for ticks in tick_iterators:
            tick = ticks.peek()
            if tick is not None and tick.t == curr_t:
                tick.push_tick(inputs)
                next(ticks)
            else:
                inputs.extend(_ZERO_TICK)

        # The global minimum never leaves a stream behind the clock
        upcoming = next_time(tick_iterators)
        if upcoming is not None:
            curr_t = upcoming
        elif exhausted_row is None:
            exhausted_row = row

        for ticks in tick_iterators:
            tick = ticks.peek()
            if tick is not None and tick.t == curr_t:
                tick.pred().push_pred(outputs)
            else:
                outputs.extend(_ZERO_PRED)

    if exhausted_row is not None:
        logger.debug("Tick streams exhausted mid-batch, zero-filling",
                     row=exhausted_row, rows=rows)

    input_batch = np.asarray(inputs, dtype=BATCH_DTYPE).reshape(
        batch_size, sequence_length, input_features
    )
    output_batch = np.asarray(outputs, dtype=BATCH_DTYPE).reshape(
        batch_size, sequence_length, output_features
    )
    return input_batch, output_batch
