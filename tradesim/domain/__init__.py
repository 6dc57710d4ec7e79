"""
Domain layer package.

Stocks, portfolios, transactions, the price random walk and the
domain errors. Pure Python: no framework imports and no store access.
"""
