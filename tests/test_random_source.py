from __future__ import annotations

import pytest

from fleet_synth.random_source import (
    DeterministicRandomSource, CategoricalSampler, Channel,
    derive_seed, channel_seed, channel_source,
)


def test_lcg_follows_park_miller_recurrence() -> None:
    rng = DeterministicRandomSource(1)
    assert rng.next() == 16806 / 2147483646
    assert rng.next() == 282475248 / 2147483646


def test_same_seed_gives_identical_stream() -> None:
    a = DeterministicRandomSource(12345)
    b = DeterministicRandomSource(12345)
    assert [a.next() for _ in range(50)] == [b() for _ in range(50)]


@pytest.mark.parametrize("seed", [1, 42, 7777, 2147483646])
def test_draws_stay_in_unit_interval(seed: int) -> None:
    rng = DeterministicRandomSource(seed)
    for _ in range(1000):
        value = rng.next()
        assert 0.0 <= value < 1.0


@pytest.mark.parametrize("seed", [0, 2147483647, 2 * 2147483647])
def test_seed_congruent_to_zero_still_draws(seed: int) -> None:
    rng = DeterministicRandomSource(seed)
    values = [rng.next() for _ in range(20)]
    assert all(0.0 <= v < 1.0 for v in values)
    assert len(set(values)) == len(values)


def test_seed_is_reduced_modulo_lcg_modulus() -> None:
    a = DeterministicRandomSource(2147483647 + 5)
    b = DeterministicRandomSource(5)
    assert [a() for _ in range(10)] == [b() for _ in range(10)]


def test_int_from_spans_low_to_low_plus_span() -> None:
    rng = DeterministicRandomSource(99)
    values = {rng.int_from(5, 10) for _ in range(2000)}
    assert values == set(range(5, 15))


def test_triangular_unit_is_bounded() -> None:
    rng = DeterministicRandomSource(3)
    for _ in range(1000):
        assert -1.5 <= rng.triangular_unit() <= 1.5


def test_derive_seed_polynomial_hash() -> None:
    assert derive_seed("A") == 65
    assert derive_seed("AB") == 65 * 31 + 66
    assert derive_seed("ab") == 3105


def test_derive_seed_never_zero() -> None:
    assert derive_seed("") == 1


@pytest.mark.parametrize("tag", ["COMED-0001", "PECO-0251", "DPL-0590", "x" * 64])
def test_derive_seed_stays_in_32_bit_range(tag: str) -> None:
    seed = derive_seed(tag)
    assert 1 <= seed <= 2 ** 31
    assert derive_seed(tag) == seed


def test_channel_offsets() -> None:
    assert [int(c) for c in Channel] == [0, 999, 7777, 8888, 9999]
    assert channel_seed("A", Channel.HEALTH) == 65 + 999
    assert channel_seed("A", Channel.EQUIPMENT) == derive_seed("A")


def test_channels_are_independent_streams() -> None:
    health = channel_source("COMED-0001", Channel.HEALTH)
    orders = channel_source("COMED-0001", Channel.WORK_ORDERS)
    assert [health() for _ in range(5)] != [orders() for _ in range(5)]
    # A fresh source restarts the channel
    assert channel_source("COMED-0001", Channel.HEALTH).next() == \
        channel_source("COMED-0001", Channel.HEALTH).next()


def test_sampler_picks_first_bucket_exceeding_draw() -> None:
    sampler = CategoricalSampler([("a", 0.2), ("b", 0.3), ("c", 0.5)])
    assert sampler.pick_with(0.0) == "a"
    assert sampler.pick_with(0.19) == "a"
    assert sampler.pick_with(0.2) == "b"
    assert sampler.pick_with(0.49) == "b"
    assert sampler.pick_with(0.99) == "c"


def test_sampler_normalizes_unnormalized_weights() -> None:
    sampler = CategoricalSampler([("x", 3), ("y", 1)])
    assert sampler.pick_with(0.74) == "x"
    assert sampler.pick_with(0.76) == "y"


def test_sampler_falls_back_to_last_bucket() -> None:
    # Shares summing below 1 leave a gap at the top of the unit interval
    sampler = CategoricalSampler([("low", 0.3), ("high", 0.6)])
    sampler.total = 1.0
    assert sampler.pick_with(0.95) == "high"


def test_sampler_skips_zero_weight_buckets() -> None:
    sampler = CategoricalSampler([("never", 0.0), ("always", 1.0)])
    assert sampler.pick_with(0.0) == "always"


def test_sampler_rejects_empty_buckets() -> None:
    with pytest.raises(ValueError):
        CategoricalSampler([])


def test_sampler_by_weight_uses_weight_function() -> None:
    sampler = CategoricalSampler.by_weight(["short", "much longer"], len)
    assert sampler.total == 16
    assert sampler.sample(DeterministicRandomSource(1)) == "short"
