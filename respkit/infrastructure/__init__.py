"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer: the built-in responses and the
response directory loader.
"""
