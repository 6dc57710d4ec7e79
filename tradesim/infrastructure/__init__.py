"""
Infrastructure layer package.

Store adapters (SQL and in-memory) behind the domain ports, plus the
background price refresh scheduler.
"""
