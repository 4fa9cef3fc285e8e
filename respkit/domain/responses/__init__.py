"""
Responses context — domain layer.

Maps response names to handlers and dispatches invocations with
an explicit request/response context.
"""
