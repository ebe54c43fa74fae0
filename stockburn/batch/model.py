"""
Model descriptor and epoch batching.

The recurrent model itself lives outside this package; the pipeline only
needs the descriptor's feature counts to lay out the arrays it produces.
"""

import itertools
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

import numpy as np

from ..config.defaults import BatchParams
from ..data.models import Prediction, Tick
from ..logging import get_logger
from ..utils.iterators import PeekableIterator
from .batcher import TimeFn, make_batches

logger = get_logger(__name__)


@dataclass(frozen=True)
class StockLSTMDesc:
    """Descriptor for a stock sequence model."""
    additional_inputs: int      # Auxiliary inputs per row
    date_inputs: int            # Time features per row
    stocks: int                 # Tick streams, and stocks to predict
    hidden: int                 # Hidden layer size
    layers: int                 # Hidden layer count

    @classmethod
    def from_params(cls, params: BatchParams, stocks: int, date_inputs: int) -> "StockLSTMDesc":
        return cls(
            additional_inputs=params.additional_inputs,
            date_inputs=date_inputs,
            stocks=stocks,
            hidden=params.hidden,
            layers=params.layers,
        )

    @property
    def input_features(self) -> int:
        """Width of an input row."""
        return self.additional_inputs + self.date_inputs + self.stocks * Tick.NN_FIELDS

    @property
    def output_features(self) -> int:
        """Width of an output row."""
        return self.stocks * Prediction.NN_FIELDS

    def make_batches(
        self,
        additional: Iterable[Sequence[float]],
        time_func: TimeFn,
        tick_iterators: Sequence[PeekableIterator],
        batch_size: int,
        sequence_length: int,
    ) -> Optional[tuple[np.ndarray, np.ndarray]]:
        """Package a batch using this descriptor's feature widths."""
        return make_batches(
            self.additional_inputs,
            self.stocks,
            self.date_inputs,
            additional,
            time_func,
            tick_iterators,
            batch_size,
            sequence_length,
        )


def iter_batches(
    desc: StockLSTMDesc,
    tick_series: Sequence[Sequence[Tick]],
    time_func: TimeFn,
    batch_size: int,
    sequence_length: int,
    additional: Optional[Iterable[Sequence[float]]] = None,
) -> Iterator[tuple[np.ndarray, np.ndarray]]:
    """
    Yield every batch of one epoch over fresh cursors.

    Call again for the next epoch; each call starts from the beginning of
    every series.

    Args:
        desc: Model descriptor
        tick_series: One tick sequence per stock
        time_func: Time feature function
        batch_size: Sequences per batch
        sequence_length: Rows per sequence
        additional: Auxiliary feature rows shared across the epoch

    Yields:
        (inputs, outputs) arrays until the streams are exhausted
    """
    cursors = [PeekableIterator(ticks) for ticks in tick_series]
    additional_rows = iter(additional) if additional is not None else itertools.repeat(())

    batches = 0
    while True:
        batch = desc.make_batches(additional_rows, time_func, cursors, batch_size, sequence_length)
        if batch is None:
            break
        batches += 1
        yield batch

    logger.info("Epoch exhausted", batches=batches, stocks=desc.stocks,
                ticks=sum(len(ticks) for ticks in tick_series))
