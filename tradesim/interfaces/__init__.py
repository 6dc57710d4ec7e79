"""
Interfaces layer package.

HTTP routes, request/response schemas and dependency wiring for the
trading API and the health check.
"""
