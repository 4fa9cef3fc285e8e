"""
Domain entities for the responses context.

They contain no framework imports and no IO operations.
The request and response handles are opaque here.
"""

from dataclasses import dataclass
from typing import Any, Callable

ResponseImplementation = Callable[..., Any]


@dataclass(frozen=True)
class ResponseHandler:
    """A named, invocable unit of behavior that finalizes a response.

    Attributes:
        name: Identifier, unique within a registry.
        implementation: Callable taking an InvocationContext first,
            then any caller-supplied arguments.
        is_built_in: True for handlers shipped with the package.
    """

    name: str
    implementation: ResponseImplementation
    is_built_in: bool = False


@dataclass(frozen=True)
class InvocationContext:
    """The request/response pair bound to a single handler invocation.

    A fresh context is built for every call, so two requests
    never observe each other's handles.
    """

    request: Any
    response: Any
    name: str
