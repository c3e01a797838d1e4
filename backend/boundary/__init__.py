"""
Boundary layer for external system integrations.

Handles all interactions with external systems (LLM providers, document parsers).
Provides adapters that satisfy the protocols in backend.core.interfaces.
"""
