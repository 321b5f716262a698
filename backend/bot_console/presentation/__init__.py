"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- dependencies/: path parameter parsing for routes
- errors.py: domain exception → HTTP response mapping
- rate_limit.py: slowapi limiter
"""
