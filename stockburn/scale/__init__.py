"""Input data scaling"""

from .exp import CLIP_RANGES, ExpScaler, TickExpScaler, clip, exp_scale_ticks

__all__ = ["CLIP_RANGES", "ExpScaler", "TickExpScaler", "clip", "exp_scale_ticks"]
