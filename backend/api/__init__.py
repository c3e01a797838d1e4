"""
API routes module.

FastAPI application and routers for all HTTP endpoints.
"""
