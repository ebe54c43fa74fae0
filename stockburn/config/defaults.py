"""Default configuration parameters for the tick data pipeline."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PriceWalkParams:
    """Second-order random walk parameters for synthetic prices."""
    initial_price: float = 40.0                      # Starting price
    jitter_std: float = 0.1                          # Per-sample price noise, price units
    velocity: float = 1e-7                           # Initial drift, price units / s
    acceleration: float = 1e-15                      # Initial drift change, price units / s^2
    jerk_std: float = 1e-19                          # Acceleration noise, price units / s^3


@dataclass(frozen=True)
class VolumeParams:
    """Compound volume distribution parameters."""
    trade_rate_mean: float = 0.03                    # Trades per second
    trade_rate_std: float = 0.05
    trade_size_mean: float = 200.0                   # Shares per trade
    trade_size_std: float = 100.0


@dataclass(frozen=True)
class ScalerParams:
    """Exponential scaler decay parameters."""
    average_decay: float = 0.999                     # Retained per elapsed second
    range_decay: float = 0.999                       # Retained per update


@dataclass(frozen=True)
class BatchParams:
    """Batch layout and model descriptor parameters."""
    batch_size: int = 256
    sequence_length: int = 180
    additional_inputs: int = 0
    hidden: int = 256
    layers: int = 2


@dataclass(frozen=True)
class IOParams:
    """Tick file parameters."""
    polygon_datetime: str = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    price: PriceWalkParams
    volume: VolumeParams
    scaler: ScalerParams
    batch: BatchParams
    io: IOParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        price=PriceWalkParams(),
        volume=VolumeParams(),
        scaler=ScalerParams(),
        batch=BatchParams(),
        io=IOParams(),
    )
