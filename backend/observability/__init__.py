"""
Observability module.

Provides logging configuration and request middleware.
"""
