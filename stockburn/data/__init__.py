"""
Tick data module.

Tick and prediction records, periodic time features, and CSV reading and
writing for generated and upstream (Polygon) tick files.
"""

from .models import Prediction, Tick

__all__ = ["Tick", "Prediction"]
