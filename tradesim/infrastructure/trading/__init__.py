"""
Trading store adapters.

SQLAlchemy-backed and dict-backed implementations of StockRepository
and PortfolioRepository, the default catalog, and the APScheduler job
that refreshes prices in background mode.
"""
