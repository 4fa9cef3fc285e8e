"""
Domain layer package.

Contains the response registry, its entities, port interfaces
and errors. No framework imports, no IO.
"""
