"""
Catalog bounded context: domain layer.

Venues and the events scheduled at them.
"""
