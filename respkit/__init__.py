"""
respkit — named HTTP response handlers for FastAPI applications.

Application package root. The package follows a layered
(ports & adapters) layout:

    - domain: The response registry, handler entities, ports, errors.
    - application: Use cases that build and describe the registry.
    - infrastructure: Response sources (built-ins, response directory).
    - interfaces: The outgoing response handle, dependencies, routers.
    - shared: Cross-cutting concerns (errors, logging).
"""
