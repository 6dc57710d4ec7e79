"""
TradeSim: simulated stock-trading API.

Application package root. This is a small service using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - trading: Stock catalog with simulated prices, user portfolios,
      cash deposits, buy/sell and transaction history.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Store adapters (in-memory, SQL) and the price scheduler.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
