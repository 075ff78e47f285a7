"""Synthetic data generators."""

from propfolio.generators.portfolio import PropertyGenerator, RefinanceGenerator

__all__ = ["PropertyGenerator", "RefinanceGenerator"]
