"""
Ticket Catalog: events and venues catalog service.

Application package root. Hexagonal layout (ports & adapters):

Bounded contexts:
    - catalog: Venues and the events hosted at them.

Layers:
    - domain: Entities, repository ports (ABCs), domain errors.
    - application: One use case class per catalog action.
    - infrastructure: In-memory and SQLAlchemy repository adapters.
    - interfaces: FastAPI routers, Pydantic schemas, wiring.
    - shared: Cross-cutting concerns (problem details, request context,
      security, logging).
"""
