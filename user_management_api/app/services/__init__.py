"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services are
given their store explicitly, so the in-memory store used here could
be swapped for a database-backed one without changing API handlers.
"""
