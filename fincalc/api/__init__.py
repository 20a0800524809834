"""
HTTP API for FinCalc.

Exposes every calculator as a stateless JSON endpoint.
"""
