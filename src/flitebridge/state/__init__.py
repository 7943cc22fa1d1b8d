"""State layer.

This package holds the shared state the poll loop and the request
dispatcher co-own: the subscription registry and the value cache.
Both are guarded internally so callers never need to lock.
"""
