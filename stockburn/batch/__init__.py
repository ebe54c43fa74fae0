"""Time-aligned batching of multiple tick streams"""

from .batcher import BATCH_DTYPE, make_batches, next_time
from .model import StockLSTMDesc, iter_batches

__all__ = ["BATCH_DTYPE", "make_batches", "next_time", "StockLSTMDesc", "iter_batches"]
