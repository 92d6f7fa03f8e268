"""
API package.

``router`` aggregates the endpoint modules; ``deps`` holds the shared
FastAPI dependencies and ``error_handlers`` the mapping from domain
errors to HTTP responses.
"""
