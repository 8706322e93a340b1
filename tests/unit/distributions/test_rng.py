import numpy as np
import pytest

from benford_engine.distributions import rng as rng_mod
from benford_engine.distributions.rng import default_rng, resolve_rng, seed_default_rng


def test_resolve_rng_passes_generator_through():
    gen = np.random.default_rng(0)
    assert resolve_rng(gen) is gen


def test_resolve_rng_builds_generator_from_seed():
    a = resolve_rng(5).random(3)
    b = resolve_rng(5).random(3)
    assert np.array_equal(a, b)


def test_resolve_rng_none_prefers_fallback():
    fallback = np.random.default_rng(1)
    assert resolve_rng(None, fallback) is fallback
    assert resolve_rng(None) is default_rng()


def test_resolve_rng_rejects_other_types():
    with pytest.raises(TypeError):
        resolve_rng("seed")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        resolve_rng(True)  # type: ignore[arg-type]


def test_seed_default_rng_makes_default_reproducible(monkeypatch):
    monkeypatch.setattr(rng_mod, "_DEFAULT_RNG", rng_mod._DEFAULT_RNG)
    seed_default_rng(9)
    first = default_rng().random(4)
    seed_default_rng(9)
    assert np.array_equal(first, default_rng().random(4))
