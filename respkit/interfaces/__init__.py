"""
Interfaces layer package.

Contains FastAPI routers, dependencies, Pydantic schemas and the
per-request outgoing response handle. No business logic belongs here.
"""
