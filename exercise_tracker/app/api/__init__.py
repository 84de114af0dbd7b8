"""
HTTP layer.

``router`` aggregates the domain routers found in ``endpoints`` and is
mounted by the application factory under ``/api``.  ``deps`` holds the
FastAPI dependencies that hand each request its store handle and
parsed body.
"""
