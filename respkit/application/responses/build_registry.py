"""
Use case: Build the response registry at application startup.

Input: ordered response sources, required response names.
Output: a frozen ResponseRegistry.
Side effects: Imports custom response modules through the sources.
Failure cases: ResponseLoadError, InvalidResponseNameError,
    MissingBaselineResponsesError.
"""

import logging
from typing import Iterable, Sequence

from respkit.domain.responses.ports import ResponseSource
from respkit.domain.responses.registry import ResponseRegistry

logger = logging.getLogger(__name__)


class BuildResponseRegistryUseCase:
    """Registers every source's handlers, validates and freezes the registry.

    Sources are registered in order, so later sources override earlier
    ones. Built-ins are expected to come first.
    """

    def __init__(
        self,
        sources: Sequence[ResponseSource],
        required_names: Iterable[str] = (),
    ) -> None:
        self._sources = sources
        self._required_names = list(required_names)

    def execute(self) -> ResponseRegistry:
        """Run the registry bootstrap.

        Returns:
            A frozen registry holding every discovered handler.

        Raises:
            MissingBaselineResponsesError: If a required name is absent.
        """
        registry = ResponseRegistry()
        for source in self._sources:
            for name, implementation in source.load():
                registry.register(
                    name, implementation, is_built_in=source.is_built_in
                )

        registry.require(self._required_names)
        registry.freeze()

        logger.info(
            "Response registry ready: %s", ", ".join(registry.names())
        )
        return registry
