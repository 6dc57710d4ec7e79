"""
Trading bounded context, domain layer.

This module contains all domain logic for the trading context:
- Stock catalog and simulated price movement
- Portfolio cash, holdings and transaction history
- Store ports and domain errors
"""
