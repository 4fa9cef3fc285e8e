"""
Port interfaces (ABCs) for the responses context.

A response source discovers (name, implementation) pairs at startup.
Infrastructure adapters implement this interface; the registry never
performs discovery or file IO itself.
"""

from abc import ABC, abstractmethod

from respkit.domain.responses.entities import ResponseImplementation


class ResponseSource(ABC):
    """Port for discovering response handlers at application startup."""

    #: Whether handlers from this source are registered as built-ins.
    is_built_in: bool = False

    @abstractmethod
    def load(self) -> list[tuple[str, ResponseImplementation]]:
        """Return the (name, implementation) pairs this source provides.

        Returns:
            Pairs in registration order.

        Raises:
            ResponseLoadError: If a handler cannot be loaded.
        """
        raise NotImplementedError
