"""
Domain layer package.

Entities, domain errors and repository ports.
No framework imports, no IO.
"""
