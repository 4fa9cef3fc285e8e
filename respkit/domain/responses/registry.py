"""
The response registry.

Maps a response name to its handler and dispatches invocations with
an explicit InvocationContext. Handlers are registered during a single
startup phase; the registry is then frozen and only read while serving
requests, so no locking is required.
"""

import keyword
import logging
from typing import Any, Iterable, Iterator

from respkit.domain.responses.entities import (
    InvocationContext,
    ResponseHandler,
    ResponseImplementation,
)
from respkit.domain.responses.errors import (
    HandlerExecutionError,
    InvalidResponseHandlerError,
    InvalidResponseNameError,
    MissingBaselineResponsesError,
    RegistryFrozenError,
    ResponseRegistryError,
    UnknownResponseError,
)

logger = logging.getLogger(__name__)


def is_valid_response_name(name: object) -> bool:
    """Return True if ``name`` can be used as a response name."""
    return (
        isinstance(name, str)
        and name.isidentifier()
        and not keyword.iskeyword(name)
        and not name.startswith("_")
    )


class ResponseRegistry:
    """Mapping from response name to ResponseHandler.

    Last registration wins: registering a name that already exists
    replaces the previous handler, which is how built-ins are overridden.

    Example:
        >>> registry = ResponseRegistry()
        >>> registry.register("not_found", not_found, is_built_in=True)
        >>> registry.invoke("not_found", context)
    """

    def __init__(self) -> None:
        self._handlers: dict[str, ResponseHandler] = {}
        self._frozen = False

    def register(
        self,
        name: str,
        implementation: ResponseImplementation,
        is_built_in: bool = False,
    ) -> ResponseHandler:
        """Insert or replace the handler for ``name``.

        Args:
            name: Response name (identifier, not starting with "_").
            implementation: Callable invoked as
                ``implementation(context, *args, **kwargs)``.
            is_built_in: Whether the handler ships with the package.

        Returns:
            The registered handler.

        Raises:
            RegistryFrozenError: If the registry is already frozen.
            InvalidResponseNameError: If ``name`` is not a usable identifier.
            InvalidResponseHandlerError: If ``implementation`` is not callable.
        """
        if self._frozen:
            raise RegistryFrozenError(str(name))
        if not is_valid_response_name(name):
            raise InvalidResponseNameError(name)
        if not callable(implementation):
            raise InvalidResponseHandlerError(name)

        previous = self._handlers.get(name)
        if previous is not None:
            logger.info(
                "Overriding %s response '%s'",
                "built-in" if previous.is_built_in else "custom",
                name,
            )

        handler = ResponseHandler(
            name=name, implementation=implementation, is_built_in=is_built_in
        )
        self._handlers[name] = handler
        return handler

    def resolve(self, name: str) -> ResponseHandler | None:
        """Return the active handler for ``name``, or None."""
        return self._handlers.get(name)

    def invoke(
        self, name: str, context: InvocationContext, *args: Any, **kwargs: Any
    ) -> Any:
        """Invoke the handler registered for ``name``.

        Args:
            name: Response name.
            context: The request/response pair for this call.
            *args: Forwarded positionally to the implementation.
            **kwargs: Forwarded as keywords to the implementation.

        Returns:
            Whatever the implementation returns.

        Raises:
            UnknownResponseError: If ``name`` is not registered.
            HandlerExecutionError: If the implementation raises.
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise UnknownResponseError(name)

        logger.debug("Invoking response '%s'", name)
        try:
            return handler.implementation(context, *args, **kwargs)
        except ResponseRegistryError:
            raise
        except Exception as exc:
            raise HandlerExecutionError(name, exc) from exc

    def require(self, names: Iterable[str]) -> None:
        """Check that every name in ``names`` is registered.

        Raises:
            MissingBaselineResponsesError: Listing every missing name.
        """
        missing = [name for name in names if name not in self._handlers]
        if missing:
            raise MissingBaselineResponsesError(missing)

    def freeze(self) -> None:
        """Reject any further registration."""
        self._frozen = True
        logger.debug("Response registry frozen with %d handlers", len(self))

    @property
    def frozen(self) -> bool:
        return self._frozen

    def names(self) -> list[str]:
        return sorted(self._handlers)

    def handlers(self) -> list[ResponseHandler]:
        return [self._handlers[name] for name in self.names()]

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
