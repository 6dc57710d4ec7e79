"""
Application layer package.

One use case per trading operation: listing stocks, reading a portfolio
or its history, depositing cash, buying, selling and refreshing prices.
Use cases talk to the stores only through domain ports.
"""
