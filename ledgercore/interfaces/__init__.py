"""
Interface layer package.

FastAPI routers and Pydantic response schemas. No business logic.
"""
