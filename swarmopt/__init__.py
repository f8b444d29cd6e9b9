"""Particle swarm optimisation: continuous and integer swarms, objectives and region-split runs."""

__version__ = "0.1.0"
__all__ = ["objectives", "swarm", "integer_swarm", "distributed", "scenarios", "cli"]