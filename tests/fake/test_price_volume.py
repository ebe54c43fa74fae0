"""Tests for the synthetic price walk and volume generators"""

import numpy as np
import pytest

from stockburn.config.defaults import PriceWalkParams, VolumeParams
from stockburn.fake.base import Normal
from stockburn.fake.price import DistGen2, random_walk_step
from stockburn.fake.volume import VolumeGen, compound_volume


class TestNormal:
    """Test distribution parameters"""

    def test_negative_std_rejected(self):
        with pytest.raises(ValueError):
            Normal(0.0, -1.0)

    def test_zero_std_returns_mean(self):
        assert Normal(2.5, 0.0).sample(np.random.default_rng(0)) == 2.5

    def test_sample_is_float(self):
        assert isinstance(Normal(0.0, 1.0).sample(np.random.default_rng(0)), float)


class TestRandomWalkStep:
    """Test the second-order walk update"""

    def test_step(self):
        # acc = 0 + 2 * 1; vel = 0 + 2 * 2; price = 40 + 2 * 4 + 0.5
        assert random_walk_step(40.0, 0.0, 0.0, 2.0, 1.0, 0.5) == (48.5, 4.0, 2.0)

    def test_zero_elapsed_only_adds_jitter(self):
        assert random_walk_step(40.0, 3.0, 2.0, 0.0, 5.0, 0.25) == (40.25, 3.0, 2.0)

    def test_constant_velocity(self):
        assert random_walk_step(10.0, 0.5, 0.0, 4.0, 0.0, 0.0) == (12.0, 0.5, 0.0)


class TestDistGen2:
    """Test the price generator"""

    def test_deterministic_without_noise(self):
        gen = DistGen2(
            rng=np.random.default_rng(0),
            price=40.0,
            jitter=Normal(0.0, 0.0),
            vel=1.0,
            acc=0.0,
            jerk=Normal(0.0, 0.0),
        )
        assert gen.next_after(2.0) == 42.0
        assert gen.next_after(1.0) == 43.0

    def test_from_params(self):
        gen = DistGen2.from_params(PriceWalkParams(), np.random.default_rng(0))
        assert gen.price == 40.0
        assert gen.vel == 1e-7
        assert gen.acc == 1e-15
        assert gen.jitter == Normal(0.0, 0.1)
        assert gen.jerk == Normal(0.0, 1e-19)

    def test_same_seed_same_walk(self):
        a = DistGen2.from_params(PriceWalkParams(), np.random.default_rng(42))
        b = DistGen2.from_params(PriceWalkParams(), np.random.default_rng(42))
        assert [a.next_after(15.0) for _ in range(50)] == [b.next_after(15.0) for _ in range(50)]


class TestCompoundVolume:
    """Test volume compounding"""

    def test_volume(self):
        # 0.03 trades/s over a minute rounds to 2 trades of 200 shares
        assert compound_volume(0.03, 200.0, 60.0) == (400.0, 2.0)

    def test_rounds_to_no_trades(self):
        assert compound_volume(0.005, 200.0, 60.0) == (0.0, 0.0)

    def test_negative_rate_clamped(self):
        assert compound_volume(-1.0, 200.0, 60.0) == (0.0, 0.0)

    def test_negative_size_clamped(self):
        volume, count = compound_volume(0.1, -50.0, 60.0)
        assert volume == 0.0
        assert count == 6.0

    def test_count_is_whole(self):
        _, count = compound_volume(0.0123, 10.0, 997.0)
        assert count == int(count)


class TestVolumeGen:
    """Test the volume generator"""

    def test_deterministic_without_noise(self):
        gen = VolumeGen(
            rng=np.random.default_rng(0),
            average=Normal(200.0, 0.0),
            no_trades=Normal(0.05, 0.0),
        )
        assert gen.next_after(60.0) == (600.0, 3.0)

    def test_from_params(self):
        gen = VolumeGen.from_params(VolumeParams(), np.random.default_rng(0))
        assert gen.average == Normal(200.0, 100.0)
        assert gen.no_trades == Normal(0.03, 0.05)

    def test_never_negative(self):
        gen = VolumeGen.from_params(VolumeParams(), np.random.default_rng(3))
        for _ in range(500):
            volume, count = gen.next_after(15.0)
            assert volume >= 0.0
            assert count >= 0.0
            if count == 0.0:
                assert volume == 0.0
