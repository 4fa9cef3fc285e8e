"""
Domain-specific errors for the responses context.

All errors raised by the registry and its collaborators are defined here.
They are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class ResponseRegistryError(Exception):
    """Base error for all response registry errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UnknownResponseError(ResponseRegistryError):
    """Raised when a response name has no registered handler."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown response: {name}")
        self.name = name


class HandlerExecutionError(ResponseRegistryError):
    """Raised when a response handler fails while being invoked.

    The original exception is kept on ``original`` and chained
    as ``__cause__``.
    """

    def __init__(self, name: str, original: BaseException) -> None:
        super().__init__(
            f"Response handler '{name}' failed: "
            f"{type(original).__name__}: {original}"
        )
        self.name = name
        self.original = original


class InvalidResponseNameError(ResponseRegistryError):
    """Raised when a response name is not a usable identifier."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Invalid response name: {name!r}")
        self.name = name


class InvalidResponseHandlerError(ResponseRegistryError):
    """Raised when a response implementation is not callable."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Response implementation for '{name}' is not callable")
        self.name = name


class MissingBaselineResponsesError(ResponseRegistryError):
    """Raised at startup when required response names are not registered."""

    def __init__(self, names: list[str]) -> None:
        super().__init__(f"Missing required responses: {', '.join(names)}")
        self.names = names


class RegistryFrozenError(ResponseRegistryError):
    """Raised when registering into a registry that is already serving."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Cannot register response '{name}': registry is frozen"
        )
        self.name = name


class ResponseLoadError(ResponseRegistryError):
    """Raised when a custom response module cannot be loaded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot load response from {path}: {reason}")
        self.path = path
        self.reason = reason


class ResponseNameConflictError(ResponseRegistryError):
    """Raised when response names shadow attributes of the response handle."""

    def __init__(self, names: list[str]) -> None:
        super().__init__(
            f"Response names conflict with reserved attributes: {', '.join(names)}"
        )
        self.names = names


class ResponseAlreadySentError(ResponseRegistryError):
    """Raised when a response body is sent more than once."""

    def __init__(self) -> None:
        super().__init__("Response has already been sent")
