"""
Stockburn - Tick Data Pipeline for Sequence Models

Prepares irregular, multi-source stock tick series for recurrent model
training: synthesizes plausible tick data, normalizes unbounded series with
decaying statistics, and merges independently timestamped streams into
fixed-shape, time-aligned batches.
"""

__version__ = "0.1.0"
__author__ = "Stockburn Team"
