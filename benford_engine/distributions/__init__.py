from benford_engine.distributions.benford import BenfordDistribution
from benford_engine.distributions.rng import default_rng, resolve_rng, seed_default_rng

__all__ = ["BenfordDistribution", "default_rng", "resolve_rng", "seed_default_rng"]
