"""
Shared module package.

Cross-cutting concerns for the API: error mapping, security headers,
rate limiting and logging setup.
"""
