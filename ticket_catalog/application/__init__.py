"""
Application layer package.

Each use case is a single class with one public entry point.
This layer depends on domain ports, never on infrastructure.
"""
