"""
Infrastructure layer package.

Concrete adapters implementing the ports defined in the domain layer.
"""
