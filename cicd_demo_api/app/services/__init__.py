"""
Service layer abstraction.

Each service encapsulates business logic for a domain and receives the
store it works on through its constructor.  By isolating logic here
the in-memory store can be swapped for a database without changing
API handlers.
"""
