"""In-memory data stores."""

from propfolio.store.portfolio import PortfolioStore

__all__ = ["PortfolioStore"]
