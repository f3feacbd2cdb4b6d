"""
Interfaces layer package.

FastAPI routers, Pydantic request/response schemas and dependency
wiring. No business logic belongs here.
"""
