"""
Core infrastructure: configuration, logging, errors and the in-memory
data store.
"""
