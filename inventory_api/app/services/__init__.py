"""
Service layer abstraction.

Each service encapsulates business logic for a domain and receives
its storage through the constructor.  Swapping the in‑memory stores
for database‑backed ones does not touch services or API handlers.
"""
