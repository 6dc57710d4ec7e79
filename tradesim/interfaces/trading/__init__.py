"""
Trading interface: routes, request schemas and dependency wiring.
"""
