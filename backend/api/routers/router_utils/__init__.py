"""
Router utility functions.

Contains helpers extracted from router endpoints to keep them clean.
"""

from backend.api.routers.router_utils.error_handling import error_detail, handle_rag_errors

__all__ = ["error_detail", "handle_rag_errors"]
