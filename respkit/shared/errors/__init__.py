"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that failures are consistently
turned into responses by the registered response handlers.
"""
